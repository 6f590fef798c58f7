# eduassess/services/scoring_service.py
from __future__ import annotations

import math
from typing import Any, Mapping, NamedTuple, Sequence

from eduassess.core.errors import ScoringError
from eduassess.models.enums import SubmissionStatus

# a score at or above this mark counts as passed
PASS_MARK = 70


class ScoreResult(NamedTuple):
    score: int
    correct_answers: int
    total_questions: int


def _round_half_up(value: float) -> int:
    # round() in Python rounds half to even (round(62.5) == 62)
    return int(math.floor(value + 0.5))


def percentage(part: int, whole: int) -> int:
    return _round_half_up(part / whole * 100)


def compute_score(
    correct_indices: Sequence[int],
    answers: Mapping[int, Any] | Mapping[str, Any],
) -> ScoreResult:
    """
    Score a submission against the answer key.

    ``correct_indices[i]`` is the correct option of the question at position
    ``i``; ``answers`` maps positions to the chosen option. A position with
    no answer, a null answer or a non-integer answer counts as wrong.
    """
    total = len(correct_indices)
    if total == 0:
        raise ScoringError("assessment has no questions")

    normalized = {int(position): choice for position, choice in answers.items()}

    correct = 0
    for position, correct_index in enumerate(correct_indices):
        choice = normalized.get(position)
        # strict comparison: True/1 or "1"/1 are not the same answer
        if type(choice) is int and choice == correct_index:
            correct += 1

    return ScoreResult(
        score=percentage(correct, total),
        correct_answers=correct,
        total_questions=total,
    )


def determine_status(is_auto_submit: bool) -> str:
    if is_auto_submit:
        return SubmissionStatus.AUTO_SUBMITTED.value
    return SubmissionStatus.COMPLETED.value


def is_passing(score: int) -> bool:
    return score >= PASS_MARK
