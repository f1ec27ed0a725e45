"""
Scoring for a submitted attempt, plus the display certificate ID.

score, percentage and passed are a pure function of the attempt. The
certificate ID also reads the clock and a random source, so scoring the same
attempt twice gives the same grade but usually a different ID.

Certificate IDs are for display only. Six timestamp digits and four base-36
characters can collide, and nothing checks them against stored results.
"""
import random
import string
import time
from datetime import date
from typing import List, Optional

from ..errors import NoActiveAttemptError
from ..schemas import Attempt, CertificatePayload, QuestionReview, Result

_BASE36 = string.digits + string.ascii_uppercase


def skill_code(skill: str) -> str:
    letters = "".join(c for c in skill.upper() if "A" <= c <= "Z")[:3]
    if not letters:
        return "XXX"
    return letters.ljust(3, letters[-1])


def certificate_id(skill: str, now_ms: Optional[int] = None, rng: Optional[random.Random] = None) -> str:
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    rng = rng or random.SystemRandom()
    suffix = str(now_ms)[-6:].rjust(6, "0")
    token = "".join(rng.choice(_BASE36) for _ in range(4))
    return f"CERT-{skill_code(skill)}-{suffix}-{token}"


def percentage(score: int, total: int) -> int:
    # integer round-half-up of 100 * score / total
    return (200 * score + total) // (2 * total)


def _check(attempt: Attempt) -> None:
    if len(attempt.selected_answers) != len(attempt.questions):
        raise NoActiveAttemptError(
            f"expected {len(attempt.questions)} answers, got {len(attempt.selected_answers)}"
        )


def score_attempt(
    attempt: Attempt,
    *,
    pass_threshold: int = 60,
    now_ms: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Result:
    _check(attempt)
    score = sum(
        1 for q, chosen in zip(attempt.questions, attempt.selected_answers)
        if chosen == q.correct_answer
    )
    total = len(attempt.questions)
    pct = percentage(score, total)
    return Result(
        score=score,
        total_questions=total,
        percentage=pct,
        passed=pct >= pass_threshold,
        certificate_id=certificate_id(attempt.skill, now_ms, rng),
    )


def review_answers(attempt: Attempt) -> List[QuestionReview]:
    """Per-question feedback for the results screen."""
    _check(attempt)
    return [
        QuestionReview(
            index=i,
            selected=chosen,
            correct_answer=q.correct_answer,
            is_correct=chosen == q.correct_answer,
            explanation=q.explanation,
        )
        for i, (q, chosen) in enumerate(zip(attempt.questions, attempt.selected_answers))
    ]


def certificate_payload(attempt: Attempt, result: Result, on: Optional[date] = None) -> Optional[CertificatePayload]:
    if not result.passed:
        return None
    return CertificatePayload(
        user_name=attempt.user_name,
        skill=attempt.skill,
        percentage=result.percentage,
        date=(on or date.today()).isoformat(),
        certificate_id=result.certificate_id,
    )
