"""
Batch validation across several generated images.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from unoform.validation.style_validator import UnoformValidator, ValidationResult

PASS_THRESHOLD = 80


@dataclass
class BatchImage:
    url: str
    style: str
    checked_items: Optional[List[str]] = None  # None -> automated placeholder path


@dataclass
class BatchStatistics:
    average_score: float
    pass_rate: float
    common_violations: List[str] = field(default_factory=list)
    best_performing: Optional[str] = None
    worst_performing: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "average_score": self.average_score,
            "pass_rate": self.pass_rate,
            "common_violations": self.common_violations,
            "best_performing": self.best_performing,
            "worst_performing": self.worst_performing,
        }


class BatchValidator:
    """
    Validates many images, reusing one UnoformValidator per style.

    Each image is scored against its own checklist: the style's validator
    is reset before every image.
    """

    def __init__(self):
        self.validators: Dict[str, UnoformValidator] = {}

    def _validator_for(self, style_id: str) -> UnoformValidator:
        if style_id not in self.validators:
            self.validators[style_id] = UnoformValidator(style_id)
        return self.validators[style_id]

    def validate_batch(self, images: List[BatchImage]) -> Dict[str, ValidationResult]:
        results: Dict[str, ValidationResult] = {}

        for image in images:
            validator = self._validator_for(image.style)
            validator.reset_checklist()

            if image.checked_items is not None:
                results[image.url] = validator.validate_manual(image.checked_items)
            else:
                results[image.url] = validator.validate_image(image.url)

        return results

    def get_statistics(self, results: Dict[str, ValidationResult]) -> BatchStatistics:
        if not results:
            return BatchStatistics(average_score=0.0, pass_rate=0.0)

        scores = [result.score for result in results.values()]
        violation_counts = Counter(
            violation.rule.description
            for result in results.values()
            for violation in result.violations
        )

        # best must beat 0 and worst must undercut 100; first url wins ties
        best, best_score = None, 0
        worst, worst_score = None, 100
        for url, result in results.items():
            if result.score > best_score:
                best, best_score = url, result.score
            if result.score < worst_score:
                worst, worst_score = url, result.score

        return BatchStatistics(
            average_score=sum(scores) / len(scores),
            pass_rate=sum(1 for score in scores if score >= PASS_THRESHOLD) / len(scores),
            common_violations=[description for description, _ in violation_counts.most_common(3)],
            best_performing=best,
            worst_performing=worst,
        )
