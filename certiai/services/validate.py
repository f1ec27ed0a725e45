from typing import Any, List, Union

from pydantic import ValidationError

from ..errors import QuestionValidationError
from ..schemas import QuizQuestion


def validate_question(candidate: Any) -> Union[QuizQuestion, QuestionValidationError]:
    """
    Check one decoded candidate against the question contract.

    `QuizQuestion` holds the contract; fields are checked in declaration order
    and only the first violation is reported. The error is returned, not
    raised; the caller owns the fallback policy.
    """
    if not isinstance(candidate, dict):
        return QuestionValidationError("<root>", f"expected an object, got {type(candidate).__name__}")
    try:
        return QuizQuestion.model_validate(candidate)
    except ValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else "<root>"
        return QuestionValidationError(field, first["msg"])


def validate_questions(candidates: List[Any]) -> Union[List[QuizQuestion], QuestionValidationError]:
    """All-or-nothing: the first bad candidate is returned with its index."""
    out: List[QuizQuestion] = []
    for i, c in enumerate(candidates):
        res = validate_question(c)
        if isinstance(res, QuestionValidationError):
            return QuestionValidationError(res.field, res.reason, index=i)
        out.append(res)
    return out
