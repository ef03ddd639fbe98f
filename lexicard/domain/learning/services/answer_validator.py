"""
Domain service for grading typed quiz answers.

Accepts exact matches, minor typos, alternative forms and answers close to
any member of an expanded valid-answer set.
"""

from collections.abc import Sequence

from lexicard.constants import (
    FEEDBACK_ALTERNATIVE_FORM,
    FEEDBACK_MINOR_SPELLING,
    FEEDBACK_SYNONYM,
)
from lexicard.domain.learning.services.text_similarity import (
    calculate_similarity,
    contains_either,
    length_ratio,
    normalize_text,
)
from lexicard.domain.learning.value_objects import MatchThresholds, ValidationResult


class AnswerValidator:
    """
    Grades a user's answer against one or more accepted answers.

    Decision chain, first match wins:
    1. Exact match after normalization
    2. Best similarity >= high-confidence threshold (typo tolerance)
    3. Containment with a sufficient length ratio (alternative form)
    4. Best similarity >= synonym threshold
    5. Incorrect
    """

    def __init__(self, thresholds: MatchThresholds | None = None) -> None:
        self.thresholds = thresholds or MatchThresholds()

    def validate(self, user_answer: str, valid_answers: str | Sequence[str]) -> ValidationResult:
        """
        Check whether an answer is correct.

        Args:
            user_answer: Text typed by the user
            valid_answers: One accepted answer or a list of them

        Returns:
            ValidationResult with the best similarity across all references
        """
        if isinstance(valid_answers, str):
            valid_answers = [valid_answers]

        normalized_user = normalize_text(user_answer)
        references = [normalize_text(answer) for answer in valid_answers]

        if not references:
            return ValidationResult(is_correct=False, similarity=0.0)

        if normalized_user in references:
            return ValidationResult(is_correct=True, similarity=100.0)

        best = max(calculate_similarity(normalized_user, ref) for ref in references)

        if best >= self.thresholds.high_confidence:
            return ValidationResult(
                is_correct=True,
                similarity=best,
                feedback=FEEDBACK_MINOR_SPELLING if best < 100 else None,  # noqa: PLR2004
            )

        for reference in references:
            if (
                contains_either(normalized_user, reference)
                and length_ratio(normalized_user, reference) >= self.thresholds.length_ratio
            ):
                return ValidationResult(
                    is_correct=True, similarity=best, feedback=FEEDBACK_ALTERNATIVE_FORM
                )

        if best >= self.thresholds.synonym:
            return ValidationResult(is_correct=True, similarity=best, feedback=FEEDBACK_SYNONYM)

        return ValidationResult(is_correct=False, similarity=best)


def validate_answer(user_answer: str, valid_answers: str | Sequence[str]) -> ValidationResult:
    """Grade an answer with the default thresholds."""
    return AnswerValidator().validate(user_answer, valid_answers)
