# freqcolor — word frequency highlighter
"""
Prints the opening lines of a text file with every word colored by how
often it occurs across the whole document.

Pipeline:
    load_content        — read the file
    get_word_counts     — build the global FrequencyTable
    color_word          — color one word by its count
    print_colored_lines — render and print the first lines
"""

from .loader import load_content, load_document
from .counting import get_word_counts, normalize_text, tokenize_for_counting
from .classify import color_word, colorize, compute_tier
from .render import print_colored_lines, render_lines, tokenize_line
from .domain import FileReadError, FrequencyTable, FrequencyTier

__all__ = [
    "load_content",
    "load_document",
    "get_word_counts",
    "normalize_text",
    "tokenize_for_counting",
    "color_word",
    "colorize",
    "compute_tier",
    "print_colored_lines",
    "render_lines",
    "tokenize_line",
    "FileReadError",
    "FrequencyTable",
    "FrequencyTier",
]
