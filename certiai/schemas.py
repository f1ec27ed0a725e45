from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .settings import QUIZ_SIZE

UNANSWERED = -1


class QuizQuestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    question: str
    options: Tuple[str, ...]
    correct_answer: int = Field(alias="correctAnswer", ge=0, le=3, strict=True)
    explanation: Optional[str] = None

    @field_validator("question")
    @classmethod
    def _non_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must be non-empty text")
        return v

    @field_validator("options")
    @classmethod
    def _four_distinct(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if len(v) != 4:
            raise ValueError("exactly 4 options")
        if any(not o.strip() for o in v):
            raise ValueError("options must be non-empty")
        if len(set(v)) != 4:
            raise ValueError("options must be distinct")
        return v


class Attempt(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    skill: str
    questions: Tuple[QuizQuestion, ...] = Field(min_length=QUIZ_SIZE, max_length=QUIZ_SIZE)
    selected_answers: Tuple[int, ...] = Field(alias="selectedAnswers")
    user_name: str = Field(default="User", alias="userName")

    @field_validator("user_name")
    @classmethod
    def _display_name(cls, v: str) -> str:
        return v.strip() or "User"


class Result(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    score: int = Field(ge=0)
    total_questions: int = Field(alias="totalQuestions")
    percentage: int = Field(ge=0, le=100)
    passed: bool
    certificate_id: str = Field(alias="certificateId")


class QuestionReview(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    index: int
    selected: int
    correct_answer: int = Field(alias="correctAnswer")
    is_correct: bool = Field(alias="isCorrect")
    explanation: Optional[str] = None


class CertificatePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(alias="userName")
    skill: str
    percentage: int
    date: str
    certificate_id: str = Field(alias="certificateId")


# ---------- request / response bodies ----------

class QuizRequest(BaseModel):
    skill: str = Field(min_length=1, max_length=80)


class QuizResponse(BaseModel):
    skill: str
    questions: List[QuizQuestion]


class SkillsResponse(BaseModel):
    skills: List[str]
    default: str


class ScoreResponse(BaseModel):
    result: Result
    review: List[QuestionReview]
    certificate: Optional[CertificatePayload] = None
