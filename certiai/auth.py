# certiai/auth.py
from typing import Optional
from jose import jwt, JWTError
from loguru import logger
from .settings import settings

def _jwt_secret() -> str:
    return (settings.SUPABASE_JWT_SECRET or "").strip()

def user_id_from_auth_header(authorization: Optional[str]) -> Optional[str]:
    """
    Return the Supabase user id (`sub`) from a Bearer token, or None.
    Missing, malformed, or unverifiable tokens all mean an anonymous caller.
    """
    if not authorization or not authorization.lower().startswith("bearer "):
        return None

    token = authorization.split(" ", 1)[1].strip()
    secret = _jwt_secret()
    if not secret:
        logger.warning("[auth] SUPABASE_JWT_SECRET not set; treating caller as anonymous")
        return None

    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=["HS256"],
            options={"verify_aud": False},  # Supabase uses 'aud': 'authenticated'
        )
    except JWTError as e:
        logger.warning(f"[auth] JWT decode failed: {e}")
        return None

    uid = payload.get("sub") or payload.get("user_id")
    if not uid:
        logger.warning(f"[auth] token has no sub/user_id; keys={list(payload.keys())}")
    return uid
