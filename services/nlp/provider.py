# usage: sentence detection, tokenization, POS tagging and person-name finding over pretrained models
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from nltk.tokenize import wordpunct_tokenize

from . import models
from .errors import FeatureUnavailableError, NlpServiceError, NotInitializedError

logger = logging.getLogger(__name__)

NER_UNAVAILABLE_MESSAGE = (
    "Named-entity model (person names) is not available.\n"
    "Load a spaCy pipeline with an 'ner' component to enable it.\n"
    "The other capabilities (sentences, tokenization, POS tagging) keep working normally."
)


@dataclass
class InitializationResult:
    """
    Outcome of `StatisticalNlpProvider.initialize()`.

    ok=False carries the fatal error (missing/broken mandatory model).
    Advisory problems (optional NER model) land in `warnings`.
    """
    ok: bool
    error: Optional[NlpServiceError] = None
    ner_available: bool = False
    warnings: List[NlpServiceError] = field(default_factory=list)


class StatisticalNlpProvider:
    """
    Facade over the pretrained models.

    Model handles are owned fields, written once by `initialize()`.
    Tokenization is rule-based and works before (or without) any model.
    """

    def __init__(self, config: Optional[models.ModelConfig] = None):
        self.config = config or models.ModelConfig()
        self._sentence_detector = None
        self._pos_tagger = None
        self._person_finder = None
        self._result: Optional[InitializationResult] = None

    @property
    def initialized(self) -> bool:
        return self._result is not None and self._result.ok

    @property
    def ner_available(self) -> bool:
        return self._person_finder is not None

    def initialize(self) -> InitializationResult:
        """
        Load the mandatory sentence + POS models, then try the optional NER model.

        Never raises for model problems; returns a result object instead.
        A successful result is cached, a failed one is retried on the next call.
        """
        if self.initialized:
            return self._result

        cfg = self.config
        try:
            sentence_detector = models.load_sentence_model(cfg.sentence_model)
            pos_exclude = models.POS_EXCLUDE
            if cfg.ner_model == cfg.pos_model:
                # one load serves both capabilities
                pos_exclude = tuple(c for c in models.POS_EXCLUDE if c in models.NER_EXCLUDE)
            pos_tagger = models.load_pipeline(cfg.pos_model, cfg.models_dir, exclude=pos_exclude)
        except NlpServiceError as e:
            logger.error("Mandatory model unavailable: %s", e.resource)
            return InitializationResult(ok=False, error=e)

        warnings = []
        person_finder, ner_error = None, None
        if cfg.ner_model == cfg.pos_model:
            person_finder = pos_tagger
        elif cfg.ner_model:
            try:
                person_finder = models.load_pipeline(cfg.ner_model, cfg.models_dir, exclude=models.NER_EXCLUDE)
            except NlpServiceError as e:
                ner_error = e
        if person_finder is not None and "ner" not in person_finder.pipe_names:
            person_finder = None
        if person_finder is None:
            advisory = FeatureUnavailableError(NER_UNAVAILABLE_MESSAGE, resource=cfg.ner_model)
            advisory.__cause__ = ner_error
            warnings.append(advisory)
            logger.warning("NER model not loaded; person-name finding disabled")

        self._sentence_detector = sentence_detector
        self._pos_tagger = pos_tagger
        self._person_finder = person_finder
        self._result = InitializationResult(
            ok=True, ner_available=person_finder is not None, warnings=warnings
        )
        return self._result

    def load_models(self) -> None:
        """Eager, idempotent load; raises the fatal error when a mandatory model is missing."""
        result = self.initialize()
        if not result.ok:
            raise result.error

    def detect_sentences(self, text: str) -> List[str]:
        self._require(self._sentence_detector, "sentence detector", "detect_sentences()")
        return [s.strip() for s in self._sentence_detector.tokenize(text or "") if s.strip()]

    @staticmethod
    def tokenize(text: str) -> List[str]:
        # alphanumeric runs and punctuation runs become separate tokens
        return wordpunct_tokenize(text or "")

    def pos_tag(self, tokens: Sequence[str]) -> List[Tuple[str, str]]:
        """Tag the caller's tokens; empty-string tokens carry no tag and are skipped."""
        self._require(self._pos_tagger, "POS tagger", "pos_tag()")
        doc, _ = self._doc_from_tokens(self._pos_tagger, tokens)
        return [(t.text, t.pos_ or t.tag_) for t in self._pos_tagger(doc)]

    def find_person_spans(self, tokens: Sequence[str]) -> List[Tuple[int, int]]:
        """
        Spans (end exclusive) of person entities, as indices into `tokens`.
        Empty-string tokens are skipped but do not shift the indices.
        """
        self._require(self._pos_tagger, "models", "find_person_spans()")
        if self._person_finder is None:
            raise FeatureUnavailableError(NER_UNAVAILABLE_MESSAGE, resource=self.config.ner_model)
        doc, positions = self._doc_from_tokens(self._person_finder, tokens)
        doc = self._person_finder(doc)
        return [
            (positions[ent.start], positions[ent.end - 1] + 1)
            for ent in doc.ents
            if ent.label_ in models.PERSON_LABELS
        ]

    def find_person_names(self, tokens: Sequence[str]) -> List[str]:
        tokens = list(tokens)
        return [" ".join(t for t in tokens[start:end] if t) for start, end in self.find_person_spans(tokens)]

    @staticmethod
    def _doc_from_tokens(nlp, tokens: Sequence[str]):
        """
        Build a Doc from the caller's tokenization instead of re-tokenizing the text.
        Returns the Doc and, per Doc token, its index in `tokens` (spaCy rejects "").
        """
        from spacy.tokens import Doc
        tokens = list(tokens)
        positions = [i for i, tok in enumerate(tokens) if tok]
        return Doc(nlp.vocab, words=[tokens[i] for i in positions]), positions

    @staticmethod
    def _require(handle, what: str, call: str) -> None:
        if handle is None:
            raise NotInitializedError(f"{what} not loaded. Call load_models() before using {call}.")


def format_tagged(tagged: Sequence[Tuple[str, str]]) -> List[str]:
    """Render tagged tokens as `token/TAG` lines."""
    return [f"{tok}/{tag}" for tok, tag in tagged]
