"""
Prompt construction for kitchen image generation.
"""

from unoform.prompt.context import (
    MaterialSelection,
    MoodSelection,
    PromptBuildingContext,
    PromptEnhancement,
    PromptLayer,
)
from unoform.prompt.builder import (
    UnoformPromptBuilder,
    build_unoform_prompt,
    enhance_existing_prompt,
    parse_prompt_to_context,
)

__all__ = [
    "MaterialSelection",
    "MoodSelection",
    "PromptBuildingContext",
    "PromptEnhancement",
    "PromptLayer",
    "UnoformPromptBuilder",
    "build_unoform_prompt",
    "enhance_existing_prompt",
    "parse_prompt_to_context",
]
