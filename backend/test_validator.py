"""Checklist scoring for the style validator"""

from unoform.styles import RuleCategory, get_style
from unoform.validation import (
    UnoformValidator,
    ViolationSeverity,
    calculate_score,
    create_validation_report,
    validate_checklist,
)
from unoform.validation.style_validator import SOURCE_CHECKLIST, SOURCE_IMAGE_PLACEHOLDER

CLASSIC = get_style("classic")
CLASSIC_MUST = [rule.description for rule in CLASSIC.validation.must_have]
CLASSIC_SHOULD = [rule.description for rule in CLASSIC.validation.should_have]
CLASSIC_MUST_NOT = [rule.description for rule in CLASSIC.validation.must_not_have]


def test_empty_checklist_scores_zero():
    result = UnoformValidator("classic").validate_manual([])

    print(f"\n{result.get_summary()}")
    assert result.score == 0
    assert not result.is_valid
    assert len(result.missing_elements) == 6
    assert result.missing_elements[0] == "horizontal slats"
    assert result.critical_count == 6
    assert result.major_count == 4
    assert result.source == SOURCE_CHECKLIST


def test_full_checklist_scores_hundred():
    result = UnoformValidator("classic").validate_manual(CLASSIC_MUST + CLASSIC_SHOULD)

    assert result.score == 100
    assert result.is_valid
    assert result.violations == []
    assert result.missing_elements == []
    assert result.suggestions == [
        "Excellent! Your design matches the style perfectly.",
        "Try variations with different materials or lighting.",
    ]


def test_forbidden_element_is_critical():
    result = UnoformValidator("classic").validate_manual(CLASSIC_MUST + CLASSIC_SHOULD + CLASSIC_MUST_NOT[:1])

    assert result.score == 80
    assert not result.is_valid
    assert result.missing_elements == []
    assert result.violations[0].severity == ViolationSeverity.CRITICAL
    assert result.violations[0].message == "Style violation: Visible handles or knobs"
    assert result.suggestions == ["Critical issues to fix:", 'Remove "handles" from your design']


def test_missing_recommendation_is_major():
    result = UnoformValidator("classic").validate_manual(CLASSIC_MUST + CLASSIC_SHOULD[:3])

    assert result.score == 90
    assert result.is_valid
    assert result.major_count == 1
    assert result.suggestions == [
        "Recommended improvements:",
        'Consider adding "dark stone" for better authenticity',
    ]


def test_missing_required_suggests_keywords():
    result = validate_checklist(CLASSIC, {})
    assert result.suggestions[0] == "Critical issues to fix:"
    assert result.suggestions[1] == 'Add "horizontal slats or slatted" to your prompt'
    # major suggestions only appear when nothing is critical
    assert len(result.suggestions) == 7


def test_score_never_negative():
    violations = validate_checklist(CLASSIC, {d: True for d in CLASSIC_MUST_NOT}).violations
    assert len(violations) == 14
    assert calculate_score(violations) == 0


def test_validate_checklist_is_pure():
    state = {CLASSIC_MUST[0]: True, CLASSIC_SHOULD[0]: True, "not a rule": True}
    snapshot = dict(state)

    first = validate_checklist(CLASSIC, state)
    second = validate_checklist(CLASSIC, state)

    assert first.to_dict() == second.to_dict()
    assert state == snapshot
    assert first.critical_count == 5
    assert first.major_count == 3
    assert first.score == 0


def test_checks_accumulate_until_reset():
    validator = UnoformValidator("classic")
    validator.validate_manual(CLASSIC_MUST[:3])
    result = validator.validate_manual(CLASSIC_MUST[3:] + CLASSIC_SHOULD)

    assert result.score == 100

    validator.reset_checklist()
    checklist = validator.get_checklist()
    assert all(not item.checked for items in checklist.values() for item in items)
    assert validator.validate_manual([]).score == 0


def test_checklist_shape():
    validator = UnoformValidator("shaker")
    validator.validate_manual(["Recessed center panel"])
    checklist = validator.get_checklist()

    assert list(checklist) == [category.value for category in RuleCategory]
    assert [len(items) for items in checklist.values()] == [5, 4, 4]
    checked = [item.description for items in checklist.values() for item in items if item.checked]
    assert checked == ["Recessed center panel"]


def test_validate_image_is_marked_as_placeholder():
    validator = UnoformValidator("avantgarde")
    result = validator.validate_image("https://example.com/kitchen.png")

    assert result.source == SOURCE_IMAGE_PLACEHOLDER
    assert result.score == validate_checklist(get_style("avantgarde"), {}).score
    assert result.to_dict()["source"] == "image-placeholder"


def test_quick_tips():
    assert UnoformValidator("shaker").get_quick_tips()[0] == "Look for recessed panel in doors"


def test_report_lists_issues_and_tips():
    result = UnoformValidator("classic").validate_manual([])
    report = create_validation_report("classic", result)

    print(report)
    assert report.startswith("# Unoform Classic Style Validation Report")
    assert "## Score: 0/100" in report
    assert "## Status: ❌ FAILED" in report
    assert "### Critical Issues:" in report
    assert "### Major Issues:" in report
    assert "- ❌ Missing required element: Horizontal wood slats/strips on drawer fronts" in report
    assert "## Quick Validation Tips:" in report


def test_report_for_passing_result():
    result = UnoformValidator("classic").validate_manual(CLASSIC_MUST + CLASSIC_SHOULD)
    report = create_validation_report("classic", result)

    assert "## Status: ✅ PASSED" in report
    assert "## Issues Found:" not in report


def test_checklist_state_is_a_copy():
    validator = UnoformValidator("classic")
    validator.validate_manual(CLASSIC_MUST[:1])

    state = validator.get_checklist_state()
    assert state[CLASSIC_MUST[0]] is True
    assert sum(state.values()) == 1
    assert len(state) == 14

    state[CLASSIC_MUST[1]] = True
    assert validator.get_checklist_state()[CLASSIC_MUST[1]] is False
