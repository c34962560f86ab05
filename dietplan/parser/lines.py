"""Line-level preprocessing: splitting, header/footer removal, hyphen merging."""

from __future__ import annotations

import logging
from collections import Counter

logger = logging.getLogger(__name__)

CONTINUATION_MARKER = "-"

# Lines this short are never treated as headers or footers
_MIN_REPEATED_LENGTH = 3


def split_lines(text: str) -> list[str]:
    """Split one page of text into trimmed, non-empty lines."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def find_repeated_lines(page_texts: list[str], num_pages: int) -> set[str]:
    """Find lines repeated on more than half of the pages.

    Such lines are letterheads or footers of the exported document.  Each
    line is counted at most once per page.

    Args:
        page_texts: Raw text of every page.
        num_pages: Total number of pages.

    Returns:
        The set of lines to drop (exact match after trimming).
    """
    if num_pages <= 1:
        return set()

    counts: Counter[str] = Counter()
    for text in page_texts:
        page_lines = {
            line.strip()
            for line in text.split("\n")
            if len(line.strip()) > _MIN_REPEATED_LENGTH
        }
        counts.update(page_lines)

    return {line for line, count in counts.items() if count > num_pages / 2}


def merge_continuations(lines: list[str]) -> list[str]:
    """Rejoin lines that were split around a lone hyphen.

    ``["yogurt di so", "-", "ia bianco"]`` becomes
    ``["yogurt di so-ia bianco"]``.  A leading hyphen is dropped, and a
    trailing one leaves the previous line untouched.
    """
    merged: list[str] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if line.strip() != CONTINUATION_MARKER:
            merged.append(line)
            i += 1
            continue

        has_next = i + 1 < len(lines)
        if merged and has_next:
            merged[-1] = f"{merged[-1]}{CONTINUATION_MARKER}{lines[i + 1]}"
            logger.debug("Merged continuation: %r", merged[-1])
            i += 2
        else:
            i += 1
    return merged


def prepare_lines(page_texts: list[str]) -> list[str]:
    """Flatten pages into the cleaned line stream fed to the segmenter."""
    repeated = find_repeated_lines(page_texts, len(page_texts))
    if repeated:
        logger.debug("Dropping %d header/footer lines", len(repeated))

    lines = [
        line
        for text in page_texts
        for line in split_lines(text)
        if line not in repeated
    ]
    return merge_continuations(lines)
