from __future__ import annotations
import logging
from typing import List

from .errors import LexError

logger = logging.getLogger(__name__)

WHITESPACE = " \t\n\r"
COMMENT = "#"
COMMA = ","

def is_whitespace(ch: str) -> bool:
    return ch != "" and ch in WHITESPACE

def tokenize(text: str) -> List[str]:
    """Split source text into tokens.

    '#' at a token boundary starts a comment up to the end of the line.
    A ',' ending a token is emitted as a standalone token; a ',' at a
    token boundary (e.g. after a space) is an empty token and raises LexError.
    Tokens carry no position info.
    """
    tokens: List[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == COMMENT:
            nl = text.find("\n", i)
            i = n if nl == -1 else nl
            continue
        if is_whitespace(ch):
            i += 1
            continue
        start = i
        while i < n and not is_whitespace(text[i]) and text[i] != COMMA:
            i += 1
        if i == start:
            raise LexError(f"token vacío en la posición {start}")
        tokens.append(text[start:i])
        if i < n and text[i] == COMMA:
            tokens.append(COMMA)
            i += 1

    logger.debug("tokenize: %d tokens", len(tokens))
    return tokens
