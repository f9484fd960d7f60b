'''
ensamblador de dos pasadas para un subconjunto MIPS32 (texto -> palabras hex)
'''

from .assembler import assemble, assemble_text, AssembleResult
from .errors import (
    AsmError, LexError, AsmSyntaxError, ResolutionError, RangeError, InternalError,
)

__all__ = [
    "assemble", "assemble_text", "AssembleResult",
    "AsmError", "LexError", "AsmSyntaxError", "ResolutionError", "RangeError", "InternalError",
]
