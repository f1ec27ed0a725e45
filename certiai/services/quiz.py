"""
Quiz generation: one model call, tolerant extraction, strict validation, and a
built-in fallback set whenever any of those steps doesn't produce a full quiz.

A generated set is used only if every returned item is valid. A single bad item
discards the whole response; model and built-in questions are never mixed.
"""
from dataclasses import dataclass
from typing import Awaitable, Callable, Literal, Tuple

from loguru import logger

from ..errors import ExtractionError, ModelUnavailableError, QuestionValidationError
from ..schemas import QuizQuestion
from ..settings import QuizConfig
from .bank import lookup
from .parse import extract_candidates
from .validate import validate_questions

ModelCall = Callable[[str], Awaitable[str]]


def build_prompt(skill: str, n: int = 5) -> str:
    return (
        f"Generate {n} multiple choice questions about {skill}. "
        "The questions should be intermediate level and test practical knowledge.\n\n"
        "Format the response as a JSON array where each question has:\n"
        '- "question": the question text\n'
        '- "options": array of 4 answer options\n'
        '- "correctAnswer": index (0-3) of the correct answer\n'
        '- "explanation": brief explanation of why the answer is correct\n\n'
        "Make sure the JSON is valid and properly formatted. "
        f"Focus on practical, real-world applications of {skill}."
    )


@dataclass(frozen=True)
class GeneratedQuiz:
    skill: str
    questions: Tuple[QuizQuestion, ...]
    source: Literal["model", "fallback"]


class QuizGenerator:
    def __init__(self, model_call: ModelCall, config: QuizConfig | None = None):
        self.model_call = model_call
        self.config = config or QuizConfig()

    def _fallback(self, skill: str, reason: str) -> GeneratedQuiz:
        logger.warning(f"[quiz] using built-in set for skill={skill!r}: {reason}")
        return GeneratedQuiz(skill, lookup(skill, self.config.default_skill), "fallback")

    async def generate_with_source(self, skill: str) -> GeneratedQuiz:
        n = self.config.quiz_size
        try:
            raw = await self.model_call(build_prompt(skill, n))
        except ModelUnavailableError as e:
            return self._fallback(skill, f"model unavailable ({e})")
        except Exception as e:
            return self._fallback(skill, f"model call raised {type(e).__name__}: {e}")

        try:
            candidates = extract_candidates(raw)
        except ExtractionError as e:
            return self._fallback(skill, str(e))

        if len(candidates) < n:
            return self._fallback(skill, f"only {len(candidates)} of {n} questions returned")

        checked = validate_questions(candidates)
        if isinstance(checked, QuestionValidationError):
            return self._fallback(skill, f"invalid question ({checked})")

        if len(checked) > n:
            logger.info(f"[quiz] model returned {len(checked)} questions, keeping first {n}")
        logger.info(f"[quiz] generated {n} questions for skill={skill!r}")
        return GeneratedQuiz(skill, tuple(checked[:n]), "model")

    async def generate(self, skill: str) -> Tuple[QuizQuestion, ...]:
        """Always returns a full quiz; model failures fall back to the built-in bank."""
        return (await self.generate_with_source(skill)).questions
