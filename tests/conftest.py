"""
Shared fixtures: blank spaCy pipelines with tiny rule components and a fake
punkt splitter stand in for the pretrained models, so no download is needed.
"""
import re

import pytest
import spacy
from spacy.language import Language
from spacy.tokens import Span

from services.nlp import models
from services.nlp.errors import ModelNotFoundError

KNOWN_PEOPLE = {"Renato", "Maria", "Silva"}


@Language.component("test_upos")
def _test_upos(doc):
    for t in doc:
        if t.is_punct:
            t.pos_ = "PUNCT"
        elif t.text[:1].isupper():
            t.pos_ = "PROPN"
        else:
            t.pos_ = "NOUN"
    return doc


@Language.component("test_person_ner")
def _test_person_ner(doc):
    # consecutive known names form one PER entity
    spans, start = [], None
    for i, t in enumerate(doc):
        if t.text in KNOWN_PEOPLE:
            start = i if start is None else start
        elif start is not None:
            spans.append(Span(doc, start, i, label="PER"))
            start = None
    if start is not None:
        spans.append(Span(doc, start, len(doc), label="PER"))
    doc.ents = spans
    return doc


class FakePunkt:
    def tokenize(self, text):
        return re.split(r"(?<=[.!?])\s+", text)


def _fake_pipeline(name, models_dir, exclude=()):
    nlp = spacy.blank("pt")
    if name == "test-pos":
        nlp.add_pipe("test_upos")
    elif name == "test-ner":
        nlp.add_pipe("test_person_ner", name="ner")
    elif name == "test-full":
        nlp.add_pipe("test_upos")
        nlp.add_pipe("test_person_ner", name="ner")
    elif name == "test-no-ner":
        pass
    else:
        raise ModelNotFoundError(f"Model '{name}' not found.", resource=str(models_dir / name))
    return nlp


@pytest.fixture
def load_calls():
    return []


@pytest.fixture
def fake_models(monkeypatch, load_calls):
    """Route model loading to the fakes above and record every load call."""

    def load_sentence(language):
        load_calls.append(("sentence", language))
        if language != "portuguese":
            raise ModelNotFoundError("missing punkt", resource=models.punkt_locator(language))
        return FakePunkt()

    def load_pipeline(name, models_dir, exclude=()):
        load_calls.append(("pipeline", name))
        return _fake_pipeline(name, models_dir, exclude)

    monkeypatch.setattr(models, "load_sentence_model", load_sentence)
    monkeypatch.setattr(models, "load_pipeline", load_pipeline)
    return load_calls


@pytest.fixture
def config(tmp_path):
    return models.ModelConfig(models_dir=tmp_path, pos_model="test-pos", ner_model="test-ner")


class FakeStopwordCorpus:
    """Stands in for nltk.corpus.stopwords; unknown languages raise like a missing file."""

    LISTS = {
        "portuguese": ["de", "é", "Um", ""],
        "english": ["The", "and"],
    }

    def words(self, lang):
        if lang not in self.LISTS:
            raise FileNotFoundError(f"No such file or directory: 'corpora/stopwords/{lang}'")
        return list(self.LISTS[lang])


@pytest.fixture
def fake_stopword_corpus(monkeypatch):
    import nltk
    import nltk.corpus

    monkeypatch.setattr(nltk.data, "find", lambda resource, *a, **kw: resource)
    monkeypatch.setattr(nltk.corpus, "stopwords", FakeStopwordCorpus())
