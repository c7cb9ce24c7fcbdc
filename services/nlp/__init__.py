# Expose the cleaning pipeline and the model-backed provider at package level.

from .preprocessing import TextCleaner, DEFAULT_STOPWORDS, load_nltk_stopwords  # normalize, punctuation, stopwords
from .provider import StatisticalNlpProvider, InitializationResult, format_tagged  # sentences, tokens, POS, NER
from .models import ModelConfig                                                    # where models live
from .errors import (                                                             # tagged error kinds
    ErrorKind,
    NlpServiceError,
    ModelNotFoundError,
    ModelLoadError,
    NotInitializedError,
    FeatureUnavailableError,
)
from .features import count_pos, pos_table, token_stats                            # demo summaries

# Define what symbols are exported when `from package import *` is used
__all__ = [
    "TextCleaner",
    "DEFAULT_STOPWORDS",
    "load_nltk_stopwords",
    "StatisticalNlpProvider",
    "InitializationResult",
    "format_tagged",
    "ModelConfig",
    "ErrorKind",
    "NlpServiceError",
    "ModelNotFoundError",
    "ModelLoadError",
    "NotInitializedError",
    "FeatureUnavailableError",
    "count_pos",
    "pos_table",
    "token_stats",
]

# Package version identifier
__version__ = "0.1.0"
