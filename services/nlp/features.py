# Summary utilities: POS tag counts and token statistics for the demo output
from collections import Counter

import pandas as pd


def count_pos(tagged):
    """
    Count occurrences of POS tags in a sequence of (token, tag) pairs.
    """
    return Counter(tag for _, tag in tagged)


def pos_table(tagged):
    """Tag counts as a DataFrame, most frequent first (ties alphabetical)."""
    counts = count_pos(tagged)
    return pd.DataFrame(sorted(counts.items(), key=lambda x: (-x[1], x[0])), columns=["POS", "count"])


def token_stats(tokens):
    """
    Token count, vocabulary size and type/token ratio (0.0 for no tokens).
    Example: ["ola", "ola", "teste"] → {"token_count": 3, "vocab_size": 2, "type_token_ratio": 0.666…}
    """
    freq = Counter(tokens)
    vocab_size = len(freq)
    token_count = sum(freq.values())
    return {
        "token_count": token_count,
        "vocab_size": vocab_size,
        "type_token_ratio": (vocab_size / token_count) if token_count else 0.0,
    }
