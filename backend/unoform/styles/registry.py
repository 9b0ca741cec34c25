# backend/unoform/styles/registry.py
"""
Style Registry - Central store for Unoform kitchen style definitions
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class RuleCategory(Enum):
    """Validation rule buckets, in evaluation order"""
    MUST_HAVE = "mustHave"
    SHOULD_HAVE = "shouldHave"
    MUST_NOT_HAVE = "mustNotHave"


@dataclass
class StyleValidationRule:
    """A keyword-backed requirement, recommendation or prohibition"""
    category: RuleCategory
    description: str  # unique within a style, used as the checklist key
    keywords: List[str]  # first keyword is the canonical phrase
    visual_markers: List[str] = field(default_factory=list)

    @property
    def canonical_keyword(self) -> str:
        return self.keywords[0]


@dataclass
class StyleValidation:
    must_have: List[StyleValidationRule] = field(default_factory=list)
    should_have: List[StyleValidationRule] = field(default_factory=list)
    must_not_have: List[StyleValidationRule] = field(default_factory=list)

    def rules_for(self, category: RuleCategory) -> List[StyleValidationRule]:
        if category == RuleCategory.MUST_HAVE:
            return self.must_have
        if category == RuleCategory.SHOULD_HAVE:
            return self.should_have
        return self.must_not_have

    def all_rules(self) -> List[StyleValidationRule]:
        return [*self.must_have, *self.should_have, *self.must_not_have]


@dataclass
class MaterialCompatibility:
    """Per-style allow-lists of materials, matched by case-insensitive substring"""
    woods: List[str] = field(default_factory=list)
    paints: List[str] = field(default_factory=list)
    metals: List[str] = field(default_factory=list)
    countertops: List[str] = field(default_factory=list)
    wood_descriptions: Dict[str, str] = field(default_factory=dict)
    paint_finishes: Dict[str, str] = field(default_factory=dict)
    finishes: List[str] = field(default_factory=list)
    color_palette: List[str] = field(default_factory=list)

    def allowed_for(self, material_type: str) -> Optional[List[str]]:
        """Allow-list for a material type, None when the type is unrestricted"""
        return {
            "wood": self.woods,
            "paint": self.paints,
            "metal": self.metals,
        }.get(material_type)


@dataclass
class StyleDefinition:
    """
    One Unoform kitchen style

    Carries both the prompt vocabulary (descriptors, formula, spatial
    phrases) and the checklist rules used to judge generated images.
    """
    id: str
    name: str
    description: str
    validation: StyleValidation

    prompt_formula: str = ""
    primary_descriptors: Dict[str, Union[List[str], Dict[str, Any]]] = field(default_factory=dict)
    spatial_relationships: List[str] = field(default_factory=list)
    material_compatibility: MaterialCompatibility = field(default_factory=MaterialCompatibility)


class StyleRegistry:
    """
    Central registry for kitchen styles

    Provides style lookup and rule access by category.
    """

    def __init__(self):
        self.styles: Dict[str, StyleDefinition] = {}

    def register(self, style: StyleDefinition) -> None:
        """Register a style in the registry"""
        self.styles[style.id] = style

    def get(self, style_id: str) -> Optional[StyleDefinition]:
        """Get a style by ID"""
        return self.styles.get(style_id)

    def get_rules(self, style_id: str, category: RuleCategory) -> List[StyleValidationRule]:
        style = self.get(style_id)
        if style is None:
            return []
        return list(style.validation.rules_for(category))

    def list_all(self) -> List[StyleDefinition]:
        """List all registered styles"""
        return list(self.styles.values())

    def get_style_summary(self) -> List[Dict[str, Any]]:
        return [
            {
                "id": style.id,
                "name": style.name,
                "description": style.description,
                "rule_counts": {
                    category.value: len(style.validation.rules_for(category))
                    for category in RuleCategory
                },
            }
            for style in self.styles.values()
        ]


# Global registry instance
_global_registry: Optional[StyleRegistry] = None


def get_style_registry() -> StyleRegistry:
    """Get or create the global style registry"""
    global _global_registry
    if _global_registry is None:
        print("[STYLE REGISTRY] Creating global StyleRegistry")
        _global_registry = StyleRegistry()
        from unoform.styles.catalog import register_all_styles
        register_all_styles(_global_registry)
    return _global_registry
