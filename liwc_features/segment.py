# liwc_features/segment.py
"""
Word and sentence segmentation used by the feature extractor.
Both splitters are regex based and keep the original case and order.
Word and whitespace classes are ASCII only: accented letters separate words.
"""
from typing import List
import re

_NON_WORD = re.compile(r"\W+\s*", re.ASCII)
_WS = re.compile(r"\s+", re.ASCII)
# Terminal marks followed by whitespace, or closing the text
_SENTENCE_END = re.compile(r"\s*[.!?]+(?:\s+|$)", re.ASCII)


def tokenize(text: str) -> List[str]:
    """
    Split text into words separated by non-word characters.
    Every run of non-word characters becomes one space, then the text is
    trimmed and split on whitespace. Returns [] for empty/punctuation-only text.
    """
    words_only = _NON_WORD.sub(" ", text or "").strip()
    if not words_only:
        return []
    return _WS.split(words_only)


def split_sentences(text: str) -> List[str]:
    """
    Split text into sentences separated by '.', '!' or '?' runs.
    Trailing empty spans are dropped (a final '.' does not open a new sentence).
    """
    spans = _SENTENCE_END.split(text or "")
    while spans and spans[-1] == "":
        spans.pop()
    return spans
