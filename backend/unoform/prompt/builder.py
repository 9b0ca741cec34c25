# backend/unoform/prompt/builder.py
"""
Unoform Prompt Builder - Layered prompt synthesis for kitchen generation

Builds a five-layer prompt from the current design selections:
1. Core identity      ("Classic Unoform kitchen")
2. Material / finish  (silently corrected to a compatible material)
3. Primary features   (style defaults, enhanced from the descriptor tables)
4. Supporting details (filtered against mustNotHave keywords)
5. Context / mood     (lighting, atmosphere, time of day)

and then applies model-specific, style and brand passes. The builder never
raises for content problems: incompatible or missing inputs fall back to
style defaults.
"""

import random
import re
from typing import List, Optional

from unoform.prompt.context import (
    MaterialSelection,
    ModelType,
    MoodSelection,
    PromptBuildingContext,
    PromptEnhancement,
    PromptLayer,
)
from unoform.styles.catalog import get_style
from unoform.styles.descriptors import (
    BRAND_REINFORCEMENTS,
    CREATIVITY_ENHANCERS,
    CRITICAL_STYLE_FEATURES,
    DEFAULT_FEATURE_PRIORITIES,
    FALLBACK_ATMOSPHERE,
    FALLBACK_LIGHTING,
    LIGHTING_ATMOSPHERE,
    MATERIAL_DESCRIPTIONS,
    STRUCTURE_PRESERVATION_PHRASES,
    STYLE_PROMPT_TEMPLATES,
    TIME_OF_DAY,
)

CANNY_STRUCTURE_CLAUSE = "maintaining exact kitchen cabinet structure and layout"
CANNY_LAYOUT_HINT = "maintaining original kitchen structure and layout"
FLUX_FORMAT_HINT = "in 16:9 wide kitchen interior format"
PHOTOGRAPHY_PHRASE = "professional architectural photography"

# Keywords without a slat/frame anchor are inserted before the first of these
MOOD_ANCHORS = ["lighting", "aesthetic", "atmosphere"]


class UnoformPromptBuilder:
    """
    Builds generation prompts for one set of design selections.

    Usage:
        builder = UnoformPromptBuilder(context)
        prompt = builder.build_prompt()

    The creativity and brand phrases are picked with ``rng``; pass a seeded
    ``random.Random`` for reproducible output.
    """

    def __init__(self, context: PromptBuildingContext, rng: Optional[random.Random] = None):
        self.context = context
        self.style = get_style(context.style)
        self.rng = rng or random.Random()
        self.layers: List[PromptLayer] = self._build_layers()

    def _build_layers(self) -> List[PromptLayer]:
        return [
            PromptLayer(1, "Core Identity", f"{self.style.name} Unoform kitchen", True),
            PromptLayer(2, "Material/Finish", self.build_material_layer(), True),
            PromptLayer(3, "Primary Features", self.build_features_layer(), True),
            PromptLayer(4, "Supporting Details", self.build_details_layer(), False),
            PromptLayer(5, "Context/Mood", self.build_mood_layer(), False),
        ]

    # ============================================================
    # LAYERS
    # ============================================================

    def build_material_layer(self) -> str:
        material = self.context.material

        if not self.is_material_compatible(material):
            suggestion = self.get_suggested_material()
            print(
                f"[PromptBuilder] {material.type} '{material.name}' not offered for "
                f"{self.style.name}, using '{suggestion}'"
            )
            return suggestion

        description = self._describe_material(material)
        if material.type == "wood":
            phrase = f"in {description}"
        elif material.type == "paint":
            phrase = f"painted in {description}"
        elif material.type == "metal":
            phrase = f"with {description} hardware"
        else:
            phrase = f"in {description}"

        if material.appearance:
            return f"{phrase}, {', '.join(material.appearance)}"
        return phrase

    def _describe_material(self, material: MaterialSelection) -> str:
        key = material.name.strip().lower()
        if material.type == "wood":
            return MATERIAL_DESCRIPTIONS["woods"].get(key, material.name)
        if material.type == "paint":
            finishes = MATERIAL_DESCRIPTIONS["finishes"]
            finish = finishes.get(material.descriptor.strip().lower(), material.descriptor)
            return f"{material.name} with {finish or finishes['matte']}"
        if material.type == "metal":
            return MATERIAL_DESCRIPTIONS["metals"].get(key, material.name)
        return material.name

    def build_features_layer(self) -> str:
        features = self.context.features or self.get_default_features()
        enhanced = [self._enhance_feature(feature) for feature in features]

        for critical in CRITICAL_STYLE_FEATURES.get(self.style.id, []):
            if not any(critical in feature for feature in enhanced):
                enhanced.append(critical)

        if self.context.model_type == "canny-pro":
            # at most three features for edge-guided generation
            return f"with {', '.join(enhanced[:3])}, {CANNY_STRUCTURE_CLAUSE}"
        return f"featuring {', '.join(enhanced)}"

    def _enhance_feature(self, feature: str) -> str:
        needle = feature.lower()
        for descriptors in self.style.primary_descriptors.values():
            if not isinstance(descriptors, list):
                continue
            for descriptor in descriptors:
                candidate = descriptor.lower()
                if needle in candidate or candidate in needle:
                    return descriptor
        return feature

    def build_details_layer(self) -> str:
        return ", ".join(detail for detail in self.context.details if self.is_detail_valid(detail))

    def build_mood_layer(self) -> str:
        mood = self.context.mood
        curated_lighting = {**LIGHTING_ATMOSPHERE["natural"], **LIGHTING_ATMOSPHERE["artificial"]}

        elements = [
            curated_lighting.get(mood.lighting)
            or FALLBACK_LIGHTING.get(mood.lighting, "soft natural light"),
            LIGHTING_ATMOSPHERE["atmosphere"].get(mood.atmosphere)
            or FALLBACK_ATMOSPHERE.get(mood.atmosphere, "Scandinavian atmosphere"),
        ]
        if mood.time_of_day:
            elements.append(TIME_OF_DAY.get(mood.time_of_day, ""))
        elements.append(PHOTOGRAPHY_PHRASE)

        return ", ".join(element for element in elements if element)

    # ============================================================
    # ASSEMBLY
    # ============================================================

    def build_prompt(self) -> str:
        """Generate the final optimized prompt"""
        segments = [layer.content for layer in self.layers if layer.content]
        segments = self.apply_model_optimizations(segments)

        prompt = ", ".join(segments)
        prompt = self.apply_style_enhancements(prompt)
        return self.ensure_brand_consistency(prompt)

    def apply_model_optimizations(self, segments: List[str]) -> List[str]:
        joined = ", ".join(segments)

        if self.context.model_type == "canny-pro":
            if not any(phrase in joined for phrase in STRUCTURE_PRESERVATION_PHRASES):
                segments = [*segments, CANNY_LAYOUT_HINT]
            # Applies to every occurrence, including ones inside user-supplied details
            return [segment.replace("featuring", "updating materials to") for segment in segments]

        if "16:9" not in joined and "wide format" not in joined:
            segments = [*segments, FLUX_FORMAT_HINT]
        return [*segments, self.rng.choice(CREATIVITY_ENHANCERS)]

    def apply_style_enhancements(self, prompt: str) -> str:
        for keyword in self.get_required_keywords():
            if keyword.lower() not in prompt.lower():
                prompt = self._insert_keyword(prompt, keyword)
        return prompt

    def ensure_brand_consistency(self, prompt: str) -> str:
        if any(phrase in prompt for phrase in BRAND_REINFORCEMENTS):
            return prompt
        return f"{prompt}, {self.rng.choice(BRAND_REINFORCEMENTS)}"

    def get_required_keywords(self) -> List[str]:
        """First two keywords of every mustHave rule, de-duplicated in order"""
        keywords: List[str] = []
        for rule in self.style.validation.must_have:
            for keyword in rule.keywords[:2]:
                if keyword not in keywords:
                    keywords.append(keyword)
        return keywords

    def _insert_keyword(self, prompt: str, keyword: str) -> str:
        if "slat" in keyword or "frame" in keyword:
            material_match = re.search(r"in [^,]+", prompt)
            if material_match:
                end = material_match.end()
                return f"{prompt[:end]} {keyword}{prompt[end:]}"

        anchors = [prompt.find(anchor) for anchor in MOOD_ANCHORS]
        anchors = [index for index in anchors if index != -1]
        if anchors:
            index = min(anchors)
            return f"{prompt[:index]}{keyword}, {prompt[index:]}"

        return prompt.replace("with ", f"with {keyword}, ", 1)

    # ============================================================
    # TEMPLATES
    # ============================================================

    def build_from_template(self, detailed: bool = True) -> str:
        """Fill the style's basic or detailed template; no enhancement passes run"""
        template = STYLE_PROMPT_TEMPLATES[self.style.id]["detailed" if detailed else "basic"]
        material = self.context.material
        countertops = self.style.material_compatibility.countertops

        substitutions = {
            "{wood}": material.name,
            "{material}": material.name,
            "{finish}": material.descriptor or "matte",
            "{color}": material.name,
            "{number}": "three",
            "{jointType}": "dovetail",
            "{mounting}": "slender steel legs",
            "{hardware}": "small brass knob",
            "{height}": "floor-to-ceiling",
            "{countertop}": countertops[0] if countertops else "quartz",
            "{lighting}": LIGHTING_ATMOSPHERE["natural"].get(
                self.context.mood.lighting, "bright Scandinavian daylight"
            ),
        }

        prompt = template
        for placeholder, value in substitutions.items():
            prompt = prompt.replace(placeholder, value)
        return prompt

    # ============================================================
    # COMPATIBILITY
    # ============================================================

    def is_material_compatible(self, material: MaterialSelection) -> bool:
        allowed = self.style.material_compatibility.allowed_for(material.type)
        if allowed is None:
            return True

        name = material.name.lower()
        return any(
            name in entry.lower() or entry.split(" ")[0].lower() in name
            for entry in allowed
        )

    def get_suggested_material(self) -> str:
        compatibility = self.style.material_compatibility

        if compatibility.woods:
            base_wood = compatibility.woods[0].split(" ")[0].lower()
            description = MATERIAL_DESCRIPTIONS["woods"].get(base_wood)
            return f"in {description}" if description else f"in {compatibility.woods[0]}"

        if compatibility.paints:
            finish = compatibility.paint_finishes.get("matte", "velvety matte finish")
            return f"painted in {compatibility.paints[0]} with {finish}"

        return "in premium Scandinavian materials"

    def get_default_features(self) -> List[str]:
        priorities = DEFAULT_FEATURE_PRIORITIES.get(self.style.id, [])
        descriptors = self.style.primary_descriptors
        features: List[str] = []

        for category in priorities:
            value = descriptors.get(category)
            if isinstance(value, list):
                features.extend(value[:1])
            elif isinstance(value, dict) and "type" in value:
                features.append(value["type"])

        if len(features) < 3:
            for category, value in descriptors.items():
                if category not in priorities and isinstance(value, list):
                    features.extend(value[:1])

        return features[:4]

    def is_detail_valid(self, detail: str) -> bool:
        text = detail.lower()
        return not any(
            keyword.lower() in text
            for rule in self.style.validation.must_not_have
            for keyword in rule.keywords
        )

    # ============================================================
    # REPORTING
    # ============================================================

    def get_enhancement_report(self, original_prompt: str) -> PromptEnhancement:
        enhanced = self.build_prompt()

        additions = [
            part.strip()
            for part in enhanced.split(",")
            if part.strip() not in original_prompt
        ]

        if self.context.model_type == "canny-pro":
            model_optimizations = [
                "Added structure preservation keywords",
                "Emphasized material updates over layout changes",
            ]
        else:
            model_optimizations = [
                "Added aspect ratio optimization",
                "Included quality enhancers",
            ]

        return PromptEnhancement(
            original=original_prompt,
            enhanced=enhanced,
            additions=additions,
            removals=[],
            model_optimizations=model_optimizations,
        )


def build_unoform_prompt(context: PromptBuildingContext, rng: Optional[random.Random] = None) -> str:
    """Convenience function to build a prompt"""
    return UnoformPromptBuilder(context, rng=rng).build_prompt()


def parse_prompt_to_context(prompt: str, style: str, model_type: ModelType) -> PromptBuildingContext:
    """
    Context used to enhance a free-text prompt.

    The prompt text is not parsed yet; a neutral oak / natural light
    context is returned for the requested style and model.
    """
    return PromptBuildingContext(
        style=style,
        material=MaterialSelection(type="wood", name="oak", descriptor="natural"),
        mood=MoodSelection(lighting="natural", atmosphere="minimalist"),
        model_type=model_type,
    )


def enhance_existing_prompt(
    prompt: str,
    style: str,
    model_type: ModelType,
    rng: Optional[random.Random] = None,
) -> PromptEnhancement:
    """Analyze a hand-written prompt against the builder's output for the style"""
    context = parse_prompt_to_context(prompt, style, model_type)
    return UnoformPromptBuilder(context, rng=rng).get_enhancement_report(prompt)
