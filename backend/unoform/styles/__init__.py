# backend/unoform/styles/__init__.py
"""
Unoform Style Library

Static reference data for the four kitchen styles:
- checklist rules (mustHave / shouldHave / mustNotHave)
- prompt vocabulary and templates
- material compatibility tables
"""

from unoform.styles.registry import (
    MaterialCompatibility,
    RuleCategory,
    StyleDefinition,
    StyleRegistry,
    StyleValidation,
    StyleValidationRule,
    get_style_registry,
)
from unoform.styles.catalog import (
    STYLE_CATALOG,
    UNOFORM_STYLES,
    get_style,
    register_all_styles,
)
from unoform.styles.descriptors import (
    LIGHTING_ATMOSPHERE,
    MATERIAL_DESCRIPTIONS,
    QUICK_TIPS,
    STYLE_PROMPT_TEMPLATES,
)

__all__ = [
    "MaterialCompatibility",
    "RuleCategory",
    "StyleDefinition",
    "StyleRegistry",
    "StyleValidation",
    "StyleValidationRule",
    "get_style_registry",
    "STYLE_CATALOG",
    "UNOFORM_STYLES",
    "get_style",
    "register_all_styles",
    "LIGHTING_ATMOSPHERE",
    "MATERIAL_DESCRIPTIONS",
    "QUICK_TIPS",
    "STYLE_PROMPT_TEMPLATES",
]
