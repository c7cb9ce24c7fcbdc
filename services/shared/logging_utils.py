# usage: one-time logging setup for CLI entry points
import logging
import sys
from pathlib import Path
from typing import Optional

_configured = False


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
) -> None:
    """
    Configure root logging: stderr console handler + optional file handler.

    Call once from the entry point; later calls are no-ops. Library modules only
    do `logger = logging.getLogger(__name__)`. Console goes to stderr so it does
    not interleave with the demo output printed on stdout.
    """
    global _configured
    if _configured:
        return

    formatter = logging.Formatter(format_string)
    handlers = []

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    handlers.append(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.setLevel(level)
    for h in handlers:
        root.addHandler(h)
    _configured = True
