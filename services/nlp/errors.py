# usage: error kinds raised by the statistical NLP provider
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    MODEL_NOT_FOUND = "model_not_found"
    NOT_INITIALIZED = "not_initialized"
    FEATURE_UNAVAILABLE = "feature_unavailable"


class NlpServiceError(RuntimeError):
    """
    Base error for model-backed operations.

    Callers branch on `kind` (and `fatal`) instead of matching message text:
      - MODEL_NOT_FOUND     → a mandatory model is missing or broken
      - NOT_INITIALIZED     → a model-backed call happened before load_models()
      - FEATURE_UNAVAILABLE → optional capability absent, everything else still works
    """
    kind = None

    def __init__(self, message: str, *, resource: Optional[str] = None):
        super().__init__(message)
        self.resource = resource

    @property
    def fatal(self) -> bool:
        return self.kind is not ErrorKind.FEATURE_UNAVAILABLE


class ModelNotFoundError(NlpServiceError):
    kind = ErrorKind.MODEL_NOT_FOUND


class ModelLoadError(ModelNotFoundError):
    """The model resource exists but could not be deserialized."""


class NotInitializedError(NlpServiceError):
    kind = ErrorKind.NOT_INITIALIZED


class FeatureUnavailableError(NlpServiceError):
    kind = ErrorKind.FEATURE_UNAVAILABLE


def missing_model_message(resource: str, remedy: str) -> str:
    """Build the user-facing text for a missing model, with install instructions."""
    return f"Model '{resource}' not found.\n{remedy}"
