# usage: nlp-demo [--input text.txt | --text "..."] [--models-dir models] [--pos-model pt_core_news_sm] [--no-ner]
# Interactive menu demonstrating the cleaning pipeline and the model-backed NLP operations.
import argparse
import logging
import sys
from pathlib import Path

from services.nlp.errors import NlpServiceError
from services.nlp.features import pos_table, token_stats
from services.nlp.models import ModelConfig, DEFAULT_MODELS_DIR, DEFAULT_SENTENCE_MODEL, DEFAULT_SPACY_MODEL
from services.nlp.preprocessing import TextCleaner, load_nltk_stopwords
from services.nlp.provider import StatisticalNlpProvider, format_tagged
from services.shared.io_utils import read_text
from services.shared.logging_utils import setup_logging

logger = logging.getLogger(__name__)

SAMPLE_TEXT = (
    "Olá, meu nome é Renato. Trabalho com ciência de dados em São Paulo. "
    "Gosto de aprender NLP em Python usando spaCy e NLTK."
)

MENU = """
----- MENU -----
1 - Preprocess text (normalize + remove punctuation + stopwords)
2 - Detect sentences
3 - Tokenize text
4 - POS tagging *requires models*
5 - Person names (NER) *optional model*
0 - Exit
"""


# ---- demos: each prints its own section to `out` ----
def demo_preprocess(cleaner, provider, text, out):
    print("\n[DEMO] Text preprocessing", file=out)
    processed = cleaner.preprocess(text)
    stats = token_stats(processed.split())
    print(f"Original text : {text}", file=out)
    print(f"Processed text: {processed}", file=out)
    print(
        f"Tokens: {stats['token_count']}  vocabulary: {stats['vocab_size']}  "
        f"type/token ratio: {stats['type_token_ratio']:.3f}",
        file=out,
    )


def demo_sentences(cleaner, provider, text, out):
    print("\n[DEMO] Sentence detection", file=out)
    provider.load_models()
    for i, sentence in enumerate(provider.detect_sentences(text), 1):
        print(f"Sentence {i}: {sentence}", file=out)


def demo_tokens(cleaner, provider, text, out):
    print("\n[DEMO] Tokenization", file=out)
    tokens = provider.tokenize(text)
    print("Tokens:", file=out)
    print(" ".join(f"[{t}]" for t in tokens), file=out)


def demo_pos(cleaner, provider, text, out):
    print("\n[DEMO] POS tagging", file=out)
    provider.load_models()
    tagged = provider.pos_tag(provider.tokenize(text))
    print("Tokens with tags (token/TAG):", file=out)
    for line in format_tagged(tagged):
        print(line, file=out)
    print("\nTag counts:", file=out)
    print(pos_table(tagged).to_string(index=False), file=out)


def demo_person_names(cleaner, provider, text, out):
    print("\n[DEMO] Named-entity recognition (PERSON)", file=out)
    provider.load_models()
    names = provider.find_person_names(provider.tokenize(text))
    if not names:
        print("No person found in the text.", file=out)
        return
    print("People found:", file=out)
    for name in names:
        print(f"- {name}", file=out)


DEMOS = {
    "1": demo_preprocess,
    "2": demo_sentences,
    "3": demo_tokens,
    "4": demo_pos,
    "5": demo_person_names,
}


def run_menu(cleaner, provider, text=SAMPLE_TEXT, *, stdin=None, stdout=None):
    """
    Read-eval loop: one option per line until "0" or end of input.

    A failing option never ends the session: service errors print their
    message, anything else is logged with its traceback.
    """
    stdin = stdin or sys.stdin
    out = stdout or sys.stdout

    print("=== NLP Text Demo ===", file=out)
    print("Sample text used in the demos:", file=out)
    print(f'"{text}"', file=out)

    while True:
        print(MENU, file=out)
        print("Choose an option: ", end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            print("\nEnd of input. Exiting.", file=out)
            break
        option = line.strip()
        if option == "0":
            print("Exiting. Thanks for trying the demo!", file=out)
            break
        demo = DEMOS.get(option)
        if demo is None:
            print("Invalid option.", file=out)
            continue
        try:
            demo(cleaner, provider, text, out)
        except NlpServiceError as e:
            log = logger.error if e.fatal else logger.warning
            log("Option %s failed (%s)", option, e.kind.value if e.kind else type(e).__name__)
            print(f"\n{e}", file=out)
        except Exception:
            logger.exception("Error while running option %s", option)


def build_parser():
    ap = argparse.ArgumentParser(description="Interactive demo: text cleaning, sentences, tokens, POS, person names.")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--input", help="Text file to use instead of the built-in sample.")
    src.add_argument("--text", help="Literal text to use instead of the built-in sample.")
    ap.add_argument("--models-dir", default=str(DEFAULT_MODELS_DIR), help="Directory holding exported spaCy pipelines.")
    ap.add_argument("--sentence-model", default=DEFAULT_SENTENCE_MODEL, help="NLTK punkt language for sentence detection.")
    ap.add_argument("--pos-model", default=DEFAULT_SPACY_MODEL, help="spaCy pipeline (dir name or package) for POS tagging.")
    ap.add_argument("--ner-model", default=DEFAULT_SPACY_MODEL, help="spaCy pipeline with an 'ner' component.")
    ap.add_argument("--no-ner", action="store_true", help="Do not try to load the NER model.")
    ap.add_argument("--nltk-stopwords", default="",
                    help="Comma list of NLTK stopword languages, e.g. portuguese,english (default: built-in lists).")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--log-file", default=None, help="Also append log records to this file.")
    return ap


def main(argv=None):
    """CLI entrypoint: parse flags, wire the cleaner + provider, run the menu."""
    ap = build_parser()
    args = ap.parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    if args.input:
        try:
            text = read_text(Path(args.input)).strip()
        except OSError as e:
            ap.error(f"cannot read --input: {e}")
    else:
        text = args.text or SAMPLE_TEXT

    langs = [s.strip() for s in args.nltk_stopwords.split(",") if s.strip()]
    try:
        cleaner = TextCleaner(load_nltk_stopwords(*langs) if langs else None)
    except NlpServiceError as e:
        raise SystemExit(str(e))

    config = ModelConfig(
        models_dir=Path(args.models_dir),
        sentence_model=args.sentence_model,
        pos_model=args.pos_model,
        ner_model=None if args.no_ner else args.ner_model,
    )
    run_menu(cleaner, StatisticalNlpProvider(config), text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
