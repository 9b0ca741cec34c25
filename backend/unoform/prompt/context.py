from dataclasses import dataclass, field
from typing import List, Literal, Optional

MaterialType = Literal["wood", "paint", "metal", "composite"]
Lighting = Literal["natural", "ambient", "dramatic", "even"]
Atmosphere = Literal["minimalist", "warm", "sophisticated", "modern"]
TimeOfDay = Literal["morning", "afternoon", "evening"]
ModelType = Literal["canny-pro", "flux-pro"]


@dataclass
class MaterialSelection:
    type: MaterialType
    name: str
    descriptor: str = ""                                # finish for paints, e.g. "matte"
    appearance: List[str] = field(default_factory=list)


@dataclass
class MoodSelection:
    lighting: Lighting = "natural"
    atmosphere: Atmosphere = "minimalist"
    time_of_day: Optional[TimeOfDay] = None


@dataclass
class PromptBuildingContext:
    # Current UI selections, rebuilt on every prompt request
    style: str
    material: MaterialSelection
    features: List[str] = field(default_factory=list)   # empty -> style defaults
    details: List[str] = field(default_factory=list)
    mood: MoodSelection = field(default_factory=MoodSelection)
    model_type: ModelType = "canny-pro"
    customer_photo: bool = False


@dataclass
class PromptLayer:
    layer: int
    name: str
    content: str
    required: bool


@dataclass
class PromptEnhancement:
    original: str
    enhanced: str
    additions: List[str] = field(default_factory=list)
    removals: List[str] = field(default_factory=list)
    model_optimizations: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "original": self.original,
            "enhanced": self.enhanced,
            "additions": self.additions,
            "removals": self.removals,
            "model_optimizations": self.model_optimizations,
        }
