import json
import random

from fastapi import APIRouter

from unoform.schemas import (
    PromptRequest,
    TemplateRequest,
    EnhanceRequest,
    ValidateRequest,
    BatchValidateRequest,
    ReportRequest,
    GenerateRequest,
)
from unoform.api.serializers import serialize
from unoform.styles import get_style_registry
from unoform.prompt import UnoformPromptBuilder, enhance_existing_prompt
from unoform.validation import (
    BatchImage,
    BatchValidator,
    UnoformValidator,
    create_validation_report,
)
from unoform.generation import GenerationError, get_generation_client, get_model_config
from unoform.db.session import record_generation

router = APIRouter()


def _rng(seed):
    return random.Random(seed) if seed is not None else None


# ============================================================
# STYLES
# ============================================================

@router.get("/styles")
def list_styles():
    """List the four kitchen styles with their rule counts"""
    registry = get_style_registry()
    return registry.get_style_summary()


@router.get("/styles/{style_id}")
def get_style_detail(style_id: str):
    registry = get_style_registry()
    style = registry.get(style_id)

    if not style:
        return {"error": f"Style '{style_id}' not found"}

    return serialize(style)


@router.get("/styles/{style_id}/checklist")
def get_style_checklist(style_id: str):
    """Empty validation checklist and inspection tips for a style"""
    if not get_style_registry().get(style_id):
        return {"error": f"Style '{style_id}' not found"}

    validator = UnoformValidator(style_id)
    return {
        "style": style_id,
        "checklist": serialize(validator.get_checklist()),
        "quick_tips": validator.get_quick_tips(),
    }


# ============================================================
# PROMPTS
# ============================================================

@router.post("/prompt")
def build_prompt(request: PromptRequest):
    try:
        builder = UnoformPromptBuilder(request.to_context(), rng=_rng(request.seed))
        prompt = builder.build_prompt()

        print(f"[Routes] Built {request.style} prompt for {request.model_type}: {prompt}")

        return {
            "status": "success",
            "prompt": prompt,
            "layers": serialize(builder.layers),
            "required_keywords": builder.get_required_keywords(),
        }

    except Exception as e:
        import traceback
        traceback.print_exc()
        return {"status": "error", "message": str(e)}


@router.post("/prompt/template")
def build_template_prompt(request: TemplateRequest):
    try:
        builder = UnoformPromptBuilder(request.to_context(), rng=_rng(request.seed))
        return {
            "status": "success",
            "prompt": builder.build_from_template(detailed=request.detailed),
        }

    except Exception as e:
        import traceback
        traceback.print_exc()
        return {"status": "error", "message": str(e)}


@router.post("/prompt/enhance")
def enhance_prompt(request: EnhanceRequest):
    try:
        report = enhance_existing_prompt(
            request.prompt,
            request.style,
            request.model_type,
            rng=_rng(request.seed),
        )
        return {"status": "success", **report.to_dict()}

    except Exception as e:
        import traceback
        traceback.print_exc()
        return {"status": "error", "message": str(e)}


# ============================================================
# VALIDATION
# ============================================================

@router.post("/validate")
def validate_style(request: ValidateRequest):
    """
    Score a checklist of observed elements against a style.

    Each request is scored on its own; nothing carries over between calls.
    """
    validator = UnoformValidator(request.style)
    result = validator.validate_manual(request.checked_items)

    print(f"\n===== STYLE VALIDATION ({request.style}) =====")
    print(result.get_summary())
    for violation in result.violations:
        print(f"  - [{violation.severity.value}] {violation.message}")
    print("================================\n")

    return result.to_dict()


@router.post("/validate/batch")
def validate_batch(request: BatchValidateRequest):
    batch = BatchValidator()
    results = batch.validate_batch([
        BatchImage(url=image.url, style=image.style, checked_items=image.checked_items)
        for image in request.images
    ])
    statistics = batch.get_statistics(results)

    print(f"[Routes] Batch validated {len(results)} images, average score {statistics.average_score:.1f}")

    return {
        "results": {url: result.to_dict() for url, result in results.items()},
        "statistics": statistics.to_dict(),
    }


@router.post("/validate/report")
def validation_report(request: ReportRequest):
    result = UnoformValidator(request.style).validate_manual(request.checked_items)
    return {
        "validation": result.to_dict(),
        "report": create_validation_report(request.style, result),
    }


# ============================================================
# GENERATION
# ============================================================

@router.post("/generate")
def generate_image(request: GenerateRequest):
    """Run a prompt through the image model and log the outcome"""
    if request.model_type == "canny-pro" and not request.image_url:
        return {"status": "error", "message": "canny-pro requires an image_url"}

    client = get_generation_client()
    if not client.api_key:
        return {"status": "error", "message": "REPLICATE_API_KEY is not configured"}

    output = None
    error = None

    try:
        output = client.generate(
            request.model_type,
            request.prompt,
            request.image_url,
            guidance=request.guidance,
            steps=request.steps,
        )
        return {
            "status": "success",
            "output": output,
            "model": get_model_config(request.model_type).name,
        }

    except GenerationError as e:
        error = e.message
        return {"status": "error", "message": e.message, "status_code": e.status_code}

    except Exception as e:
        import traceback
        traceback.print_exc()
        error = str(e)
        return {"status": "error", "message": str(e)}

    finally:
        record_generation(
            style=request.style,
            model_type=request.model_type,
            prompt=request.prompt,
            image_url=request.image_url or None,
            output=output if output is None or isinstance(output, str) else json.dumps(output),
            succeeded=error is None and output is not None,
            error=error,
        )
