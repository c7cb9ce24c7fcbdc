# usage: helper for reading user-supplied text files
from pathlib import Path


def read_text(path) -> str:
    """
    Read a text file, trying common encodings in order.

    Steps:
    - Try utf-8, utf-8-sig, cp1252.
    - Fall back to latin-1, which accepts any byte sequence.

    Raises:
        FileNotFoundError: when `path` does not exist.
    """
    p = Path(path)
    for enc in ("utf-8", "utf-8-sig", "cp1252"):
        try:
            return p.read_text(encoding=enc)
        except UnicodeDecodeError:
            continue
    return p.read_text(encoding="latin-1")
