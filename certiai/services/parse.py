import json
from typing import Any, List

from ..errors import ExtractionError


def extract_candidates(s: str) -> List[Any]:
    """
    Pull the JSON array out of raw model text.

    The model may wrap the array in prose or ```json fences, so the span from
    the first '[' to the last ']' is decoded. Items are not checked here.
    """
    text = s or ""
    start, end = text.find("["), text.rfind("]")
    if start == -1 or end <= start:
        raise ExtractionError("no [...] span in model output")
    try:
        data = json.loads(text[start:end + 1])
    except (ValueError, RecursionError) as e:
        # JSONDecodeError is a ValueError; huge int literals and deep nesting raise the others
        raise ExtractionError(f"array span is not decodable: {type(e).__name__}") from e
    return data
