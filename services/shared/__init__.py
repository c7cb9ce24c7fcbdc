# Import key utilities so they are accessible at package level
from .io_utils import read_text
from .logging_utils import setup_logging

# Define what gets exported when `from package import *` is used
__all__ = [
    "read_text",
    "setup_logging",
]

# Version of this package/module
__version__ = "0.1.0"
