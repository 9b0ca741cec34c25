from unoform.validation.style_validator import (
    UnoformValidator,
    ValidationResult,
    ViolationSeverity,
)


def create_validation_report(style_id: str, result: ValidationResult) -> str:
    """Render a validation result as a markdown report"""
    tips = UnoformValidator(style_id).get_quick_tips()

    lines = [
        f"# Unoform {style_id.capitalize()} Style Validation Report",
        "",
        f"## Score: {result.score}/100",
        f"## Status: {'✅ PASSED' if result.is_valid else '❌ FAILED'}",
        "",
    ]

    if result.violations:
        lines.append("## Issues Found:")
        critical = [v for v in result.violations if v.severity == ViolationSeverity.CRITICAL]
        major = [v for v in result.violations if v.severity == ViolationSeverity.MAJOR]

        if critical:
            lines.append("")
            lines.append("### Critical Issues:")
            lines.extend(f"- ❌ {v.message}" for v in critical)

        if major:
            lines.append("")
            lines.append("### Major Issues:")
            lines.extend(f"- ⚠️  {v.message}" for v in major)

    lines.append("")
    lines.append("## Suggestions:")
    lines.extend(f"- {suggestion}" for suggestion in result.suggestions)

    lines.append("")
    lines.append("## Quick Validation Tips:")
    lines.extend(f"- {tip}" for tip in tips)

    return "\n".join(lines) + "\n"
