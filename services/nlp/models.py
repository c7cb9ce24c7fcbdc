# usage: model configuration + resolution/loading (NLTK punkt sentences, spaCy pipelines)
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from .errors import ModelLoadError, ModelNotFoundError, missing_model_message

logger = logging.getLogger(__name__)

DEFAULT_MODELS_DIR = Path("models")
DEFAULT_SENTENCE_MODEL = "portuguese"
DEFAULT_SPACY_MODEL = "pt_core_news_sm"

# Components each capability can do without (dropped at load time)
POS_EXCLUDE = ("parser", "ner", "lemmatizer", "senter")
NER_EXCLUDE = ("parser", "tagger", "morphologizer", "lemmatizer", "attribute_ruler", "senter")

PERSON_LABELS = frozenset({"PER", "PERSON"})


@dataclass(frozen=True)
class ModelConfig:
    """
    Where to find the models.

    - sentence_model: NLTK punkt language, looked up under tokenizers/punkt_tab/
    - pos_model / ner_model: spaCy pipeline, either a directory under
      `models_dir` or an installed package name
    - ner_model=None turns person-name finding off
    """
    models_dir: Path = DEFAULT_MODELS_DIR
    sentence_model: str = DEFAULT_SENTENCE_MODEL
    pos_model: str = DEFAULT_SPACY_MODEL
    ner_model: Optional[str] = DEFAULT_SPACY_MODEL


def punkt_locator(language: str) -> str:
    return f"tokenizers/punkt_tab/{language}/"


def load_sentence_model(language: str):
    """
    Load the punkt sentence splitter for `language` through the NLTK data loader.

    Raises:
        ModelNotFoundError: the punkt_tab resource is not installed.
        ModelLoadError: the resource exists but cannot be read.
    """
    import nltk
    from nltk.tokenize.punkt import PunktTokenizer

    locator = punkt_locator(language)
    try:
        nltk.data.find(locator)
    except LookupError:
        raise ModelNotFoundError(
            missing_model_message(
                locator,
                'Install it with: python -c "import nltk; nltk.download(\'punkt_tab\')"',
            ),
            resource=locator,
        ) from None

    try:
        return PunktTokenizer(language)
    except (OSError, ValueError, LookupError) as e:
        raise ModelLoadError(f"Error loading sentence model: {locator}", resource=locator) from e


def resolve_pipeline(name: str, models_dir: Path) -> str:
    """
    Resolve a spaCy pipeline reference to something spacy.load accepts.

    Order:
      1) directory `models_dir/name`
      2) `name` itself as a directory
      3) an installed pipeline package called `name`
    """
    import spacy

    candidate = Path(models_dir) / name
    if candidate.is_dir():
        return str(candidate)
    if Path(name).is_dir():
        return name
    if spacy.util.is_package(name):
        return name
    raise ModelNotFoundError(
        missing_model_message(
            str(candidate),
            f"Install it with: python -m spacy download {name}\n"
            f"or place an exported pipeline directory at {candidate}.",
        ),
        resource=str(candidate),
    )


def load_pipeline(name: str, models_dir: Path, exclude: Sequence[str] = ()):
    """Resolve and load one spaCy pipeline, without the components in `exclude`."""
    import spacy

    target = resolve_pipeline(name, models_dir)
    logger.info("Loading spaCy pipeline %s", target)
    try:
        return spacy.load(target, exclude=list(exclude))
    except (OSError, ValueError, KeyError) as e:
        raise ModelLoadError(f"Error loading spaCy pipeline: {target}", resource=target) from e
