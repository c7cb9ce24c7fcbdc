"""
Command-line surface: the interactive demo menu.
"""
from .menu import main, run_menu

__all__ = [
    "main",
    "run_menu",
]
