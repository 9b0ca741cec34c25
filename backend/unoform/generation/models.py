from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ModelConfig:
    id: str
    type: str                     # canny-pro | flux-pro
    name: str
    version: str                  # prediction API model version hash
    description: str = ""
    defaults: Dict[str, Any] = field(default_factory=dict)
    cost_per_run: float = 0.0
    average_time: int = 0         # seconds


MODEL_CONFIGS: Dict[str, ModelConfig] = {
    "canny-pro": ModelConfig(
        id="flux-canny-pro",
        type="canny-pro",
        name="FLUX Canny Pro",
        version="3e03126bd3fbb9349783930f4139eb6c488aef2197c4d3fd2a826b35ccecea3d",
        description="Edge-guided generation. Keeps the kitchen layout while changing style.",
        defaults={"guidance": 30, "steps": 50, "safety_tolerance": 2, "output_format": "png"},
        cost_per_run=0.032,
        average_time=15,
    ),
    "flux-pro": ModelConfig(
        id="flux-1.1-pro",
        type="flux-pro",
        name="FLUX 1.1 Pro",
        version="80a09d66baa990429c2f5ae8a4306bf778a1b3775afd01cc2cc8bdbe9033769c",
        description="Text-to-image generation with full creative redesign.",
        defaults={
            "aspect_ratio": "16:9",
            "width": 1344,
            "height": 768,
            "safety_tolerance": 2,
            "output_format": "png",
        },
        cost_per_run=0.04,
        average_time=20,
    ),
}


def get_model_config(model_type: str) -> ModelConfig:
    return MODEL_CONFIGS[model_type]


def build_model_input(
    model_type: str,
    prompt: str,
    image_url: str,
    guidance: Optional[float] = None,
    steps: Optional[int] = None,
) -> Dict[str, Any]:
    """Prediction input payload for a model"""
    config = get_model_config(model_type)

    if model_type == "flux-pro":
        payload = {"prompt": prompt, **config.defaults}
        if guidance:
            payload["guidance_scale"] = guidance
        if steps:
            payload["num_inference_steps"] = steps
        return payload

    return {
        "prompt": prompt,
        "control_image": image_url,
        "guidance": guidance or config.defaults["guidance"],
        "steps": steps or config.defaults["steps"],
        "safety_tolerance": config.defaults["safety_tolerance"],
        "output_format": config.defaults["output_format"],
    }
