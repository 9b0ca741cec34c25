from pydantic import BaseModel
from typing import Optional, List, Literal

from unoform.prompt.context import MaterialSelection, MoodSelection, PromptBuildingContext

StyleId = Literal["classic", "copenhagen", "shaker", "avantgarde"]
ModelTypeField = Literal["canny-pro", "flux-pro"]


class MaterialPayload(BaseModel):
    type: Literal["wood", "paint", "metal", "composite"]
    name: str
    descriptor: str = ""  # paint finish, e.g. "matte"
    appearance: List[str] = []


class MoodPayload(BaseModel):
    lighting: Literal["natural", "ambient", "dramatic", "even"] = "natural"
    atmosphere: Literal["minimalist", "warm", "sophisticated", "modern"] = "minimalist"
    time_of_day: Optional[Literal["morning", "afternoon", "evening"]] = None


class PromptRequest(BaseModel):
    """Current design selections for prompt building"""
    style: StyleId
    material: MaterialPayload
    features: List[str] = []  # empty -> style defaults
    details: List[str] = []
    mood: MoodPayload = MoodPayload()
    model_type: ModelTypeField = "canny-pro"
    customer_photo: bool = False
    seed: Optional[int] = None  # fixes the random phrase picks

    def to_context(self) -> PromptBuildingContext:
        return PromptBuildingContext(
            style=self.style,
            material=MaterialSelection(
                type=self.material.type,
                name=self.material.name,
                descriptor=self.material.descriptor,
                appearance=list(self.material.appearance),
            ),
            features=list(self.features),
            details=list(self.details),
            mood=MoodSelection(
                lighting=self.mood.lighting,
                atmosphere=self.mood.atmosphere,
                time_of_day=self.mood.time_of_day,
            ),
            model_type=self.model_type,
            customer_photo=self.customer_photo,
        )


class TemplateRequest(PromptRequest):
    detailed: bool = True


class EnhanceRequest(BaseModel):
    """Free-text prompt to compare against the builder's output"""
    prompt: str
    style: StyleId
    model_type: ModelTypeField = "canny-pro"
    seed: Optional[int] = None


class ValidateRequest(BaseModel):
    style: StyleId
    checked_items: List[str] = []


class BatchImagePayload(BaseModel):
    url: str
    style: StyleId
    checked_items: Optional[List[str]] = None  # None -> automated placeholder


class BatchValidateRequest(BaseModel):
    images: List[BatchImagePayload]


class ReportRequest(ValidateRequest):
    pass


class GenerateRequest(BaseModel):
    prompt: str
    image_url: str = ""
    model_type: ModelTypeField = "canny-pro"
    style: Optional[StyleId] = None
    guidance: Optional[float] = None
    steps: Optional[int] = None
