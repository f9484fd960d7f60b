# src/mips32_asm/linker.py
from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Dict, List

from .ast import Label, Operation, Symbol
from .errors import ResolutionError
from .isa import Mnemonic

logger = logging.getLogger(__name__)

# ---------- Resultados de la pasada 1 ----------

@dataclass(frozen=True)
class LinkResult:
    symtab: Dict[str, int]     # etiqueta -> PC (índice de instrucción)
    symbols: List[Symbol]      # secuencia sin etiquetas

# ---------- Pasada 1 (tabla de etiquetas) ----------

def first_pass(symbols: List[Symbol]) -> LinkResult:
    """Quita las etiquetas registrando su PC; directivas y operaciones ocupan un slot."""
    symtab: Dict[str, int] = {}
    out: List[Symbol] = []
    pc = 0
    for s in symbols:
        if isinstance(s, Label):
            if s.name in symtab:
                raise ResolutionError(f"múltiples declaraciones de la etiqueta: {s.name}")
            symtab[s.name] = pc
            logger.debug("etiqueta %s -> pc %d", s.name, pc)
            continue
        out.append(s)
        pc += 1
    return LinkResult(symtab=symtab, symbols=out)

# ---------- Pasada 2 (reescritura de referencias) ----------

def _lookup(symtab: Dict[str, int], name: str) -> int:
    addr = symtab.get(name)
    if addr is None:
        raise ResolutionError(f"etiqueta no encontrada: {name}")
    return addr

def second_pass(link: LinkResult) -> List[Symbol]:
    """Sustituye los nombres de etiqueta por desplazamientos numéricos.

    - beq: relativo al PC siguiente, symtab[L] - pc - 1
    - j:   índice absoluto symtab[L]
    El rango de cada desplazamiento se valida al codificar.
    """
    out: List[Symbol] = []
    for pc, s in enumerate(link.symbols):
        if isinstance(s, Operation) and s.mnemonic == Mnemonic.BEQ.value:
            rel = _lookup(link.symtab, s.args[2]) - pc - 1
            s = replace(s, args=[s.args[0], s.args[1], rel])
            logger.debug("beq en pc %d -> offset %d", pc, rel)
        elif isinstance(s, Operation) and s.mnemonic == Mnemonic.J.value:
            s = replace(s, args=[_lookup(link.symtab, s.args[0])])
        out.append(s)
    return out

def resolve_labels(symbols: List[Symbol]) -> List[Symbol]:
    """Resolución en dos pasadas; la tabla no sobrevive a la llamada."""
    return second_pass(first_pass(symbols))
