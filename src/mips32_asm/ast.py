'''
dataclases de símbolos (Label, Directive, Operation)
'''

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Union

# Argumento de una operación: índice de registro, inmediato o nombre de etiqueta
Arg = Union[int, str]

@dataclass(frozen=True)
class Label:
    """Etiqueta en el código fuente (p.ej., 'loop:'). No ocupa posición de PC."""
    name: str

@dataclass(frozen=True)
class Directive:
    """Directiva del ensamblador (sólo '.dw')."""
    name: str
    args: List[int] = field(default_factory=list)

@dataclass(frozen=True)
class Operation:
    """Operación con mnemónico y argumentos en el orden que espera el codificador."""
    mnemonic: str
    args: List[Arg] = field(default_factory=list)

Symbol = Union[Label, Directive, Operation]
