import asyncio, json
from openai import OpenAI, OpenAIError
from loguru import logger

from ..errors import ModelUnavailableError
from ..settings import settings

_client: OpenAI | None = None

def client() -> OpenAI:
    global _client
    if _client is None:
        _client = OpenAI(
            api_key=settings.OPENAI_API_KEY,
            timeout=settings.OPENAI_TIMEOUT,
            max_retries=settings.OPENAI_MAX_RETRIES,
        )
    return _client

def _mock_quiz(prompt: str) -> str:
    topic = "the topic"
    if " about " in prompt:
        topic = prompt.split(" about ", 1)[1].split(". ", 1)[0].strip() or topic
    items = [
        {
            "question": f"Mock question {i + 1} about {topic}?",
            "options": [f"Option {c}" for c in "ABCD"],
            "correctAnswer": i % 4,
            "explanation": "This is a MOCK explanation.",
        }
        for i in range(5)
    ]
    return "Here are your questions:\n```json\n" + json.dumps(items) + "\n```"

def _llm_sync(messages, *, max_tokens=1500, temperature=0.7):
    if settings.MOCK_MODE:
        return _mock_quiz(messages[-1].get("content", "") if messages else "")
    resp = client().chat.completions.create(
        model=settings.OPENAI_MODEL,
        messages=messages,
        max_tokens=max_tokens,
        temperature=temperature,
    )
    return resp.choices[0].message.content or ""

async def llm(messages, **kw):
    return await asyncio.to_thread(_llm_sync, messages, **kw)

async def invoke(prompt: str) -> str:
    """Single model call: prompt text in, raw response text out."""
    try:
        return await llm([{"role": "user", "content": prompt}])
    except OpenAIError as e:
        logger.warning(f"[llm] model call failed: {type(e).__name__}: {e}")
        raise ModelUnavailableError(str(e)) from e
