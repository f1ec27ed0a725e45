from fastapi import APIRouter, BackgroundTasks, Depends, Header, HTTPException
from loguru import logger

from ..auth import user_id_from_auth_header
from ..errors import NoActiveAttemptError
from ..schemas import Attempt, ScoreResponse
from ..services.db import save_result
from ..services.scoring import certificate_payload, review_answers, score_attempt
from ..settings import QuizConfig
from .quiz import get_quiz_config

router = APIRouter()

@router.post("/results", response_model=ScoreResponse)
def results(
    attempt: Attempt,
    background: BackgroundTasks,
    Authorization: str | None = Header(default=None),
    config: QuizConfig = Depends(get_quiz_config),
):
    try:
        result = score_attempt(attempt, pass_threshold=config.pass_threshold)
        review = review_answers(attempt)
    except NoActiveAttemptError as e:
        raise HTTPException(400, str(e))

    logger.info(
        f"[results] skill={attempt.skill!r} score={result.score}/{result.total_questions} "
        f"passed={result.passed} cert={result.certificate_id}"
    )

    user_id = user_id_from_auth_header(Authorization)
    if user_id:
        background.add_task(
            save_result,
            user_id=user_id, skill=attempt.skill, score=result.score,
            total_questions=result.total_questions, user_name=attempt.user_name,
        )
    else:
        logger.info("[results] anonymous caller; result not persisted")

    return ScoreResponse(
        result=result,
        review=review,
        certificate=certificate_payload(attempt, result),
    )
