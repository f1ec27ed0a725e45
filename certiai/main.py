from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler

from .settings import settings
from .services.bank import AVAILABLE_SKILLS, verify_bank
from .routers import quiz, results, debug

# ---------- logging ----------
logger.remove()
logger.add(
    lambda msg: print(msg, end=""),
    format="{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | {message}",
    level="INFO",
)

# ---------- startup ----------
@asynccontextmanager
async def lifespan(_: FastAPI):
    verify_bank()
    logger.info(f"[startup] fallback bank ok: {len(AVAILABLE_SKILLS)} skills")
    yield

# ---------- app / limiter ----------
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.RATE_LIMIT])
app = FastAPI(title="CertiAI API", version="1.0.0", lifespan=lifespan)
app.state.limiter = limiter

# ---------- CORS ----------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "Authorization", "Content-Type", "X-Requested-With"],
    expose_headers=["Authorization"],
)

# SlowAPI middleware + handler
app.add_middleware(SlowAPIMiddleware)
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# ---------- health ----------
@app.get("/health")
def health():
    return {
        "ok": True,
        "mock": settings.MOCK_MODE,
        "model": settings.OPENAI_MODEL,
        "rate_limit": settings.RATE_LIMIT,
        "pass_threshold": settings.PASS_THRESHOLD,
        "skills": len(AVAILABLE_SKILLS),
    }

# ---------- routers ----------
app.include_router(quiz.router, tags=["quiz"])
app.include_router(results.router, tags=["results"])
app.include_router(debug.router, tags=["debug"])
