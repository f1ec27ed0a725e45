from fastapi import APIRouter, Depends
from loguru import logger

from ..schemas import QuizRequest, QuizResponse, SkillsResponse
from ..services.bank import AVAILABLE_SKILLS
from ..services.llm import invoke
from ..services.quiz import QuizGenerator
from ..settings import settings, QuizConfig

router = APIRouter()

def get_quiz_config() -> QuizConfig:
    return QuizConfig.from_settings(settings)

def get_quiz_generator(config: QuizConfig = Depends(get_quiz_config)) -> QuizGenerator:
    return QuizGenerator(invoke, config)

@router.get("/skills", response_model=SkillsResponse)
def skills(config: QuizConfig = Depends(get_quiz_config)):
    return SkillsResponse(skills=list(AVAILABLE_SKILLS), default=config.default_skill)

@router.post("/quiz", response_model=QuizResponse)
async def quiz(body: QuizRequest, generator: QuizGenerator = Depends(get_quiz_generator)):
    skill = body.skill.strip()
    generated = await generator.generate_with_source(skill)
    logger.info(f"[quiz] skill={skill!r} source={generated.source}")
    return QuizResponse(skill=skill, questions=list(generated.questions))
