"""DTOs for quiz use cases."""

from dataclasses import dataclass

from lexicard.domain.learning.value_objects import ValidationResult


@dataclass
class AnswerCheck:
    """DTO for a graded answer together with the answers that were accepted."""

    result: ValidationResult
    valid_answers: list[str]
