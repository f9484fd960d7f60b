from __future__ import annotations
from typing import Iterable, List
from .utils import to_hex32

def to_hex(word: str) -> str:
    """Cadena binaria de 32 bits -> 8 dígitos hex en minúscula."""
    return to_hex32(int(word, 2))

def to_hex_lines(words: Iterable[str]) -> List[str]:
    return [to_hex(w) for w in words]

def to_bin_lines(words: Iterable[str]) -> List[str]:
    return list(words)

def _write_lines(lines: List[str], path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")

def write_hex(words: Iterable[str], path: str) -> None:
    _write_lines(to_hex_lines(words), path)

def write_bin(words: Iterable[str], path: str) -> None:
    _write_lines(to_bin_lines(words), path)
