"""
Pipeline Orchestrator for freqcolor.

Pipeline stages:
    1. Load the document
    2. Count words over the whole document
    3. Classify and render the first lines

Data flows forward only. The frequency table is passed explicitly from
the counting stage to the rendering stage.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import DEFAULT_PATH, LINE_LIMIT
from ..counting import get_word_counts
from ..domain import Document, FrequencyTable
from ..loader import PathLike, load_document
from ..render import render_lines

logger = logging.getLogger(__name__)


# =============================================================================
# PIPELINE RESULT
# =============================================================================

@dataclass(frozen=True)
class PipelineResult:
    """
    Complete result of one run.

    Exposes:
    - The loaded document
    - The global frequency table
    - The rendered lines, ready to print
    """
    document: Document
    table: FrequencyTable
    lines: list[str]

    @property
    def lines_rendered(self) -> int:
        return len(self.lines)


# =============================================================================
# PIPELINE EXECUTION
# =============================================================================

def prepare_document(
    path: PathLike = DEFAULT_PATH,
    content: Optional[str] = None,
) -> tuple[Document, FrequencyTable]:
    """
    Stages 1 and 2: load the document and count its words.

    Raises:
        FileReadError: If the file cannot be read
    """
    if content is None:
        document = load_document(path)
    else:
        document = Document(text=content, source=str(path))

    return document, get_word_counts(document.text)


def run_pipeline(
    path: PathLike = DEFAULT_PATH,
    limit: int = LINE_LIMIT,
    color: Optional[bool] = True,
    content: Optional[str] = None,
) -> PipelineResult:
    """
    Execute the full pipeline.

    Args:
        path: File to read
        limit: Maximum number of lines to render
        color: True forces ANSI colors, False disables them, None auto-detects
        content: Use this text instead of reading path

    Returns:
        PipelineResult with the table and rendered lines

    Raises:
        FileReadError: If the file cannot be read
    """
    document, table = prepare_document(path, content)
    lines = render_lines(document.text, table, limit=limit, color=color)

    logger.debug("Rendered %d lines from %s", len(lines), document.source)
    return PipelineResult(document=document, table=table, lines=lines)


def count_words(path: PathLike = DEFAULT_PATH) -> FrequencyTable:
    """Load path and build its frequency table only."""
    _, table = prepare_document(path)
    return table
