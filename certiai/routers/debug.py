from fastapi import APIRouter, Header
from ..auth import user_id_from_auth_header

router = APIRouter()

@router.get("/whoami")
def whoami(Authorization: str | None = Header(default=None)):
    """
    Returns the Supabase user_id if the Authorization header contains a valid token.
    Useful for quickly debugging auth between frontend and backend.
    """
    return {"user_id": user_id_from_auth_header(Authorization)}
