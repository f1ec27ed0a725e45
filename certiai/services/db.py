from supabase import create_client, Client
from loguru import logger
from ..settings import settings

_supabase: Client | None = None

def supabase() -> Client:
    global _supabase
    if _supabase is None:
        _supabase = create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
    return _supabase

def insert_quiz_result(*, user_id: str, skill: str, score: int, total_questions: int, user_name: str):
    sb = supabase()
    sb.table("quiz_results").insert({
        "user_id": user_id,
        "skill": skill,
        "score": score,
        "total_questions": total_questions,
        "user_name": user_name,
    }).execute()

def save_result(*, user_id: str, skill: str, score: int, total_questions: int, user_name: str) -> bool:
    """Best-effort write; failures are logged and never raised to the caller."""
    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
        logger.info("[db] Supabase not configured; result not saved")
        return False
    try:
        insert_quiz_result(
            user_id=user_id, skill=skill, score=score,
            total_questions=total_questions, user_name=user_name,
        )
    except Exception as e:
        logger.warning(f"[db] quiz_results insert failed for user_id={user_id}: {e}")
        return False
    logger.info(f"[db] quiz_results insert ok for user_id={user_id} skill={skill!r}")
    return True
