# usage: deterministic text cleaning (normalize -> strip punctuation -> drop stopwords)
import re
import unicodedata
from typing import Iterable, Optional

from .errors import ModelNotFoundError, missing_model_message

_WS_RUN = re.compile(r"\s+")

# Minimal demo lists; both are already lowercase and unaccented
_PT_STOPWORDS = (
    "a", "o", "as", "os", "de", "da", "do", "das", "dos",
    "e", "ou", "em", "para", "por", "com", "sem",
    "um", "uma", "uns", "umas",
    "que", "se", "na", "no", "nas", "nos",
    "este", "esta", "estes", "estas", "esse", "essa", "isso", "isto",
)
_EN_STOPWORDS = (
    "a", "an", "the", "and", "or", "in", "on", "at", "for",
    "of", "to", "with", "without", "is", "are", "was", "were",
)

DEFAULT_STOPWORDS = frozenset(_PT_STOPWORDS) | frozenset(_EN_STOPWORDS)


class TextCleaner:
    """
    Pure string pipeline over a fixed stopword set.

    Every stage is callable on its own; `preprocess` is their plain composition:
        remove_stopwords(remove_punctuation(normalize(text)))
    """

    def __init__(self, stopwords: Optional[Iterable[str]] = None):
        custom = frozenset(stopwords) if stopwords is not None else frozenset()
        self._stopwords = custom or DEFAULT_STOPWORDS

    @property
    def stopwords(self) -> frozenset:
        return self._stopwords

    def preprocess(self, text: Optional[str]) -> str:
        return self.remove_stopwords(self.remove_punctuation(self.normalize(text)))

    @staticmethod
    def normalize(text: Optional[str]) -> str:
        """
        Lowercase and fold accents.

        Lowercasing runs first so accented capitals fold like lowercase ones,
        then NFD splits letters from their diacritics and every combining
        mark (category M*) is dropped. `None` means no content -> "".
        """
        if text is None:
            return ""
        decomposed = unicodedata.normalize("NFD", text.lower())
        return "".join(ch for ch in decomposed if not unicodedata.category(ch).startswith("M"))

    @staticmethod
    def remove_punctuation(text: Optional[str]) -> str:
        """
        Replace each punctuation char (category P*) with a space, then collapse
        all whitespace runs in one pass and trim.
        """
        if text is None:
            return ""
        spaced = "".join(" " if unicodedata.category(ch).startswith("P") else ch for ch in text)
        return _WS_RUN.sub(" ", spaced).strip()

    def remove_stopwords(self, text: Optional[str]) -> str:
        """Drop exact stopword matches; survivors keep their order and duplicates."""
        if text is None:
            return ""
        # str.split() never yields empty tokens, so "" and "   " give ""
        return " ".join(tok for tok in text.split() if tok not in self._stopwords)


def load_nltk_stopwords(*languages: str) -> frozenset:
    """
    Build a stopword set from the NLTK stopwords corpus, folded through
    `TextCleaner.normalize` so entries match normalized tokens.

    Raises:
        ModelNotFoundError: when the corpus, or one of the languages, is not
            installed locally.
    """
    import nltk
    from nltk.corpus import stopwords

    try:
        nltk.data.find("corpora/stopwords")
    except LookupError:
        raise ModelNotFoundError(
            missing_model_message(
                "corpora/stopwords",
                'Install it with: python -c "import nltk; nltk.download(\'stopwords\')"',
            ),
            resource="corpora/stopwords",
        ) from None

    words = set()
    for lang in languages or ("portuguese", "english"):
        try:
            raw = stopwords.words(lang)
        except OSError as e:
            locator = f"corpora/stopwords/{lang}"
            raise ModelNotFoundError(
                missing_model_message(locator, f"No NLTK stopword list for language '{lang}'."),
                resource=locator,
            ) from e
        words.update(TextCleaner.normalize(w) for w in raw)
    words.discard("")
    return frozenset(words)
