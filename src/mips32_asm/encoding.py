# src/mips32_asm/encoding.py
from __future__ import annotations
from typing import List

from .ast import Label, Directive, Operation, Symbol, Arg
from .errors import InternalError, RangeError
from .isa import (
    spec as isa_spec, is_mnemonic,
    ISA_WIDTH, DATA_WIDTH, OPCODE_BITS, FUNCT_BITS, REG_BITS, SHAMT_BITS,
    IMM_BITS, TARGET_BITS,
)
from .utils import is_signed_nbit, is_unsigned_nbit, twos_complement, to_bin

# ---------------- Helpers de campos ----------------

def _reg(r: Arg) -> str:
    # el parser ya validó el rango: aquí un registro inválido es un fallo interno
    if not isinstance(r, int) or not is_unsigned_nbit(r, REG_BITS):
        raise InternalError(f"se esperaba un registro 0..31, encontrado: '{r}'")
    return to_bin(r, REG_BITS)

def _imm16(imm: Arg) -> str:
    if not isinstance(imm, int):
        raise InternalError(f"inmediato sin resolver: '{imm}'")
    if not is_signed_nbit(imm, IMM_BITS):
        raise RangeError(f"se esperaba un inmediato en [-2^15, 2^15), encontrado: '{imm}'")
    return to_bin(twos_complement(imm, IMM_BITS), IMM_BITS)

# ---------------- Empaquetado por formato ----------------

def _pack_R(args: List[Arg], funct: int) -> str:
    # args = [rd, rs, rt]
    return (to_bin(0, OPCODE_BITS) +
            _reg(args[1]) + _reg(args[2]) + _reg(args[0]) +
            to_bin(0, SHAMT_BITS) + to_bin(funct, FUNCT_BITS))

def _pack_I(args: List[Arg], opcode: int) -> str:
    # Ambos campos de registro salen de args[1]; args[0] no llega a la palabra.
    return to_bin(opcode, OPCODE_BITS) + _reg(args[1]) + _reg(args[1]) + _imm16(args[2])

def _pack_J(args: List[Arg], opcode: int) -> str:
    target = args[0]
    if not isinstance(target, int):
        raise InternalError(f"destino de salto sin resolver: '{target}'")
    if not is_unsigned_nbit(target, TARGET_BITS):
        raise RangeError(f"se esperaba un destino de salto en [0, 2^26), encontrado: '{target}'")
    return to_bin(opcode, OPCODE_BITS) + to_bin(target, TARGET_BITS)

def _pack_dw(d: Directive) -> str:
    if d.name != ".dw":
        raise InternalError(f"directiva inesperada: '{d.name}'")
    value = d.args[0]
    if value < 0:
        raise RangeError(f"la directiva .dw no admite valores negativos: '{value}'")
    if not is_unsigned_nbit(value, DATA_WIDTH):
        raise RangeError(f"la directiva .dw admite valores en [0, 2^{DATA_WIDTH}), encontrado: '{value}'")
    return to_bin(value, DATA_WIDTH).ljust(ISA_WIDTH, "0")

# ---------------- Codificador principal ----------------

def emit(symbol: Symbol) -> str:
    """Codifica un símbolo ya resuelto como cadena binaria de 32 bits."""
    if isinstance(symbol, Label):
        raise InternalError(f"etiqueta inesperada en la codificación: '{symbol.name}'")
    if isinstance(symbol, Directive):
        word = _pack_dw(symbol)
    elif isinstance(symbol, Operation):
        if not is_mnemonic(symbol.mnemonic):
            raise InternalError(f"operación inesperada: '{symbol.mnemonic}'")
        sp = isa_spec(symbol.mnemonic)
        if sp.itype == "R":
            word = _pack_R(symbol.args, sp.funct)
        elif sp.itype == "I":
            word = _pack_I(symbol.args, sp.opcode)
        elif sp.itype == "J":
            word = _pack_J(symbol.args, sp.opcode)
        else:
            raise InternalError(f"tipo de instrucción no soportado: {sp.itype}")
    else:
        raise InternalError(f"tipo de símbolo inesperado: {type(symbol).__name__}")

    if len(word) != ISA_WIDTH:
        raise InternalError(f"se esperaban {ISA_WIDTH} bits, se generaron {len(word)}")
    return word

def encode(symbols: List[Symbol]) -> List[str]:
    return [emit(s) for s in symbols]
