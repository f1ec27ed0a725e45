from dataclasses import dataclass
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List

QUIZ_SIZE = 5

class Settings(BaseSettings):
    # OpenAI
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_TIMEOUT: float = 30.0
    OPENAI_MAX_RETRIES: int = 2
    MOCK_MODE: bool = False

    # Assessment knobs
    PASS_THRESHOLD: int = Field(default=60, ge=0, le=100)
    DEFAULT_SKILL: str = "JavaScript"

    # Safety/abuse knobs
    RATE_LIMIT: str = "30/minute"

    # CORS
    ALLOW_ORIGINS: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"]
    )

    # Optional extra frontend
    FRONTEND_ORIGIN: str | None = None

    # Supabase
    SUPABASE_URL: str | None = None
    SUPABASE_SERVICE_ROLE_KEY: str | None = None
    SUPABASE_JWT_SECRET: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@dataclass(frozen=True)
class QuizConfig:
    """Process-wide assessment settings, handed to the generator and scorer."""
    quiz_size: int = QUIZ_SIZE
    default_skill: str = "JavaScript"
    pass_threshold: int = 60

    @classmethod
    def from_settings(cls, s: "Settings") -> "QuizConfig":
        return cls(default_skill=s.DEFAULT_SKILL, pass_threshold=s.PASS_THRESHOLD)


settings = Settings()
if settings.FRONTEND_ORIGIN:
    settings.ALLOW_ORIGINS.append(settings.FRONTEND_ORIGIN)
