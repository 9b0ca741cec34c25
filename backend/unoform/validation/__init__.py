"""
Validation module for generated kitchen images.
"""

from unoform.validation.style_validator import (
    ChecklistItem,
    UnoformValidator,
    ValidationResult,
    Violation,
    ViolationSeverity,
    calculate_score,
    validate_checklist,
)
from unoform.validation.batch import (
    PASS_THRESHOLD,
    BatchImage,
    BatchStatistics,
    BatchValidator,
)
from unoform.validation.report import create_validation_report

__all__ = [
    "ChecklistItem",
    "UnoformValidator",
    "ValidationResult",
    "Violation",
    "ViolationSeverity",
    "calculate_score",
    "validate_checklist",
    "PASS_THRESHOLD",
    "BatchImage",
    "BatchStatistics",
    "BatchValidator",
    "create_validation_report",
]
