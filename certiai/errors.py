from typing import Optional


class CertiAIError(Exception):
    """Base class for assessment pipeline errors."""


class ExtractionError(CertiAIError):
    """Model output did not contain a decodable JSON array."""


class QuestionValidationError(CertiAIError):
    """A decoded candidate broke the question contract.

    Returned (not raised) by the validator so the caller can pick a fallback.
    """

    def __init__(self, field: str, reason: str, index: Optional[int] = None):
        self.field = field
        self.reason = reason
        self.index = index
        where = f"item {index}: " if index is not None else ""
        super().__init__(f"{where}{field}: {reason}")


class ModelUnavailableError(CertiAIError):
    """The model call failed at the transport or provider level."""


class NoActiveAttemptError(CertiAIError):
    """Scoring was asked to grade an attempt whose answers don't line up."""


class BankIntegrityError(CertiAIError):
    """A built-in fallback set breaks the question contract."""
