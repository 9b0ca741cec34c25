"""Prompt builder behaviour across styles and models"""

import random

import pytest

from unoform.prompt import (
    MaterialSelection,
    MoodSelection,
    PromptBuildingContext,
    UnoformPromptBuilder,
    build_unoform_prompt,
    enhance_existing_prompt,
    parse_prompt_to_context,
)
from unoform.prompt.builder import CANNY_LAYOUT_HINT, CANNY_STRUCTURE_CLAUSE, FLUX_FORMAT_HINT
from unoform.styles.descriptors import BRAND_REINFORCEMENTS, CREATIVITY_ENHANCERS

STYLES = ["classic", "copenhagen", "shaker", "avantgarde"]
MATERIALS = [
    MaterialSelection(type="wood", name="oak"),
    MaterialSelection(type="paint", name="white", descriptor="matte"),
    MaterialSelection(type="metal", name="steel"),
]


def make_context(style="classic", model_type="canny-pro", **overrides):
    values = dict(
        style=style,
        material=MaterialSelection(type="wood", name="walnut"),
        mood=MoodSelection(lighting="natural", atmosphere="warm", time_of_day="morning"),
        model_type=model_type,
    )
    values.update(overrides)
    return PromptBuildingContext(**values)


def test_seeded_builds_are_identical():
    first = build_unoform_prompt(make_context(model_type="flux-pro"), rng=random.Random(7))
    second = build_unoform_prompt(make_context(model_type="flux-pro"), rng=random.Random(7))
    assert first == second


def test_repeated_build_keeps_non_random_text():
    builder = UnoformPromptBuilder(make_context(), rng=random.Random(3))

    def without_brand(prompt):
        # canny picks only the brand phrase at random
        for phrase in BRAND_REINFORCEMENTS:
            prompt = prompt.replace(phrase, "")
        return prompt

    assert without_brand(builder.build_prompt()) == without_brand(builder.build_prompt())


@pytest.mark.parametrize("style", STYLES)
@pytest.mark.parametrize("material", MATERIALS, ids=lambda m: m.type)
def test_identity_and_material_layers_never_empty(style, material):
    builder = UnoformPromptBuilder(make_context(style=style, material=material))
    assert builder.layers[0].content == f"{builder.style.name} Unoform kitchen"
    assert builder.layers[1].content.strip()


def test_details_drop_forbidden_keywords():
    builder = UnoformPromptBuilder(make_context(
        details=["decorative curved handles", "dark granite countertop"],
    ))
    assert builder.build_details_layer() == "dark granite countertop"


@pytest.mark.parametrize("style", STYLES)
def test_details_layer_never_contains_forbidden_keywords(style):
    details = ["visible handles", "ornate molding", "high-gloss doors", "frames everywhere", "oak shelf"]
    builder = UnoformPromptBuilder(make_context(style=style, details=details))
    layer = builder.build_details_layer().lower()
    for rule in builder.style.validation.must_not_have:
        for keyword in rule.keywords:
            for detail in details:
                if keyword.lower() in detail.lower():
                    assert detail.lower() not in layer


@pytest.mark.parametrize("style", STYLES)
def test_canny_prompt_preserves_structure(style):
    prompt = build_unoform_prompt(make_context(style=style, model_type="canny-pro"))
    assert CANNY_LAYOUT_HINT in prompt
    assert CANNY_STRUCTURE_CLAUSE in prompt
    assert "featuring" not in prompt


def test_canny_rewrites_featuring_in_details():
    prompt = build_unoform_prompt(make_context(details=["island featuring oak shelves"]))
    assert "featuring" not in prompt
    assert "island updating materials to oak shelves" in prompt


@pytest.mark.parametrize("style", STYLES)
def test_flux_prompt_has_format_and_enhancer(style):
    prompt = build_unoform_prompt(make_context(style=style, model_type="flux-pro"))
    assert "16:9 wide kitchen interior format" in prompt
    assert sum(1 for phrase in CREATIVITY_ENHANCERS if phrase in prompt) == 1
    assert "featuring" in prompt


@pytest.mark.parametrize("model_type", ["canny-pro", "flux-pro"])
def test_brand_phrase_always_present(model_type):
    prompt = build_unoform_prompt(make_context(model_type=model_type))
    assert any(phrase in prompt for phrase in BRAND_REINFORCEMENTS)


def test_canny_features_capped_at_three():
    features = ["island unit", "pantry wall", "bar seating", "wine rack", "spice drawer"]
    builder = UnoformPromptBuilder(make_context(style="avantgarde", features=features))
    layer = builder.build_features_layer()
    assert layer.startswith("with ")
    assert layer.endswith(CANNY_STRUCTURE_CLAUSE)
    assert layer.startswith("with island unit, pantry wall, bar seating, ")
    assert "wine rack" not in layer
    assert "spice drawer" not in layer


def test_flux_features_keep_critical_features():
    builder = UnoformPromptBuilder(make_context(style="shaker", model_type="flux-pro", features=["island"]))
    layer = builder.build_features_layer()
    assert layer.startswith("featuring island")
    for critical in ["frame-and-panel doors", "recessed center panels", "small hardware"]:
        assert critical in layer


def test_default_features_come_from_style():
    builder = UnoformPromptBuilder(make_context(style="copenhagen"))
    features = builder.get_default_features()
    assert 0 < len(features) <= 4


def test_required_keyword_inserted_after_material():
    context = make_context(
        style="classic",
        material=MaterialSelection(type="wood", name="oak"),
        mood=MoodSelection(),
    )
    prompt = build_unoform_prompt(context, rng=random.Random(1))
    assert prompt.startswith(
        "Classic Unoform kitchen, in honey-golden oak with prominent straight grain "
        "horizontal slats thick frames,"
    )


def test_slat_and_frame_keywords_follow_first_in_run():
    builder = UnoformPromptBuilder(make_context())
    prompt = builder._insert_keyword("Classic kitchen, in oak, soft lighting", "horizontal slats")
    assert prompt == "Classic kitchen, in oak horizontal slats, soft lighting"


def test_other_keywords_go_before_earliest_mood_anchor():
    builder = UnoformPromptBuilder(make_context())
    prompt = builder._insert_keyword("Classic kitchen, soft aesthetic, warm lighting", "shadow gaps")
    assert prompt == "Classic kitchen, soft shadow gaps, aesthetic, warm lighting"


def test_keyword_falls_back_to_first_with():
    builder = UnoformPromptBuilder(make_context())
    assert builder._insert_keyword("Classic kitchen, with steel", "handleless") == (
        "Classic kitchen, with handleless, steel"
    )


def test_keyword_without_anchor_leaves_prompt_unchanged():
    builder = UnoformPromptBuilder(make_context())
    assert builder._insert_keyword("Classic kitchen", "handleless") == "Classic kitchen"
    assert builder._insert_keyword("Classic kitchen", "thick frames") == "Classic kitchen"


@pytest.mark.parametrize("detail", ["cinematic 16:9 view", "wide format panorama"])
def test_flux_format_hint_skipped_when_present(detail):
    prompt = build_unoform_prompt(make_context(model_type="flux-pro", details=[detail]))
    assert detail in prompt
    assert FLUX_FORMAT_HINT not in prompt


def test_canny_layout_hint_skipped_when_structure_phrase_present():
    prompt = build_unoform_prompt(make_context(details=["maintaining kitchen layout"]))
    assert "maintaining kitchen layout" in prompt
    assert CANNY_LAYOUT_HINT not in prompt


def test_seeded_rng_picks_exact_enhancer():
    expected = random.Random(5).choice(CREATIVITY_ENHANCERS)
    prompt = build_unoform_prompt(make_context(model_type="flux-pro"), rng=random.Random(5))

    assert expected in prompt
    assert [phrase for phrase in CREATIVITY_ENHANCERS if phrase in prompt] == [expected]


def test_required_keywords_are_first_two_per_rule():
    builder = UnoformPromptBuilder(make_context(style="classic"))
    keywords = builder.get_required_keywords()
    assert keywords[:2] == ["horizontal slats", "slatted"]
    assert len(keywords) == len(set(keywords))
    assert len(keywords) == 12


def test_incompatible_material_is_replaced():
    builder = UnoformPromptBuilder(make_context(material=MaterialSelection(type="metal", name="gold")))
    assert not builder.is_material_compatible(builder.context.material)
    assert builder.layers[1].content == builder.get_suggested_material()
    assert "gold" not in builder.layers[1].content


def test_copenhagen_has_no_paints():
    builder = UnoformPromptBuilder(make_context(
        style="copenhagen",
        material=MaterialSelection(type="paint", name="white"),
    ))
    assert builder.layers[1].content.startswith("in ")


def test_compatible_paint_uses_finish_description():
    builder = UnoformPromptBuilder(make_context(
        style="shaker",
        material=MaterialSelection(type="paint", name="sage green", descriptor="matte"),
    ))
    assert builder.layers[1].content.startswith("painted in sage green with ")


def test_composite_material_is_always_allowed():
    builder = UnoformPromptBuilder(make_context(
        material=MaterialSelection(type="composite", name="terrazzo"),
    ))
    assert builder.layers[1].content == "in terrazzo"


def test_shaker_template_substitutes_everything():
    context = make_context(style="shaker", material=MaterialSelection(type="paint", name="sage green"))
    builder = UnoformPromptBuilder(context)
    for detailed in (False, True):
        prompt = builder.build_from_template(detailed=detailed)
        assert "{" not in prompt
        assert "sage green" in prompt


@pytest.mark.parametrize("style", STYLES)
def test_detailed_templates_have_no_placeholders_left(style):
    prompt = UnoformPromptBuilder(make_context(style=style)).build_from_template(detailed=True)
    assert "{" not in prompt and "}" not in prompt


def test_enhancement_report_for_canny():
    report = enhance_existing_prompt("Classic kitchen with oak", "classic", "canny-pro", rng=random.Random(2))
    assert report.original == "Classic kitchen with oak"
    assert report.enhanced
    assert report.additions
    assert report.removals == []
    assert report.model_optimizations == [
        "Added structure preservation keywords",
        "Emphasized material updates over layout changes",
    ]


def test_enhancement_report_for_flux():
    report = enhance_existing_prompt("a kitchen", "avantgarde", "flux-pro")
    assert report.model_optimizations == ["Added aspect ratio optimization", "Included quality enhancers"]
    assert report.to_dict()["enhanced"] == report.enhanced


def test_parse_prompt_defaults():
    context = parse_prompt_to_context("anything", "shaker", "flux-pro")
    assert context.style == "shaker"
    assert context.model_type == "flux-pro"
    assert context.material.name == "oak"
    assert context.mood.lighting == "natural"
    assert context.mood.atmosphere == "minimalist"
