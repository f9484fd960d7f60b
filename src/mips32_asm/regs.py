'''
registros '$N': validación y conversión a índice
'''

from __future__ import annotations

from .errors import AsmSyntaxError, RangeError
from .isa import NUM_REGS
from .utils import parse_num

def reg_num(token: str) -> int:
    """Devuelve el índice 0..31 de un literal '$N'.

    Lanza AsmSyntaxError si no tiene forma de registro y RangeError si el
    número queda fuera de [0, 32).
    """
    if not token.startswith("$"):
        raise AsmSyntaxError(f"se esperaba un registro, encontrado: '{token}'")
    try:
        n = parse_num(token[1:])
    except AsmSyntaxError:
        raise AsmSyntaxError(f"se esperaba un registro, encontrado: '{token}'") from None
    if not 0 <= n < NUM_REGS:
        raise RangeError(f"se esperaba un registro $0..${NUM_REGS - 1}, encontrado: '{token}'")
    return n
