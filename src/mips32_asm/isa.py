'''
tabla formal del subconjunto MIPS32 (opcodes, funct, formatos y formas)
'''

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict

# Anchos de campo (bits)
ISA_WIDTH   = 32
DATA_WIDTH  = 8
OPCODE_BITS = 6
FUNCT_BITS  = 6
REG_BITS    = 5
SHAMT_BITS  = 5
IMM_BITS    = 16
TARGET_BITS = 26
NUM_REGS    = 1 << REG_BITS

class Mnemonic(str, Enum):
    """Conjunto cerrado de mnemónicos soportados."""
    ADD  = "add"
    SUB  = "sub"
    AND  = "and"
    OR   = "or"
    SLT  = "slt"
    ADDI = "addi"
    BEQ  = "beq"
    J    = "j"
    LB   = "lb"
    SB   = "sb"

@dataclass(frozen=True)
class ISpec:
    """Especificación de una instrucción.

    - itype: 'R', 'I' o 'J'
    - opcode: campo de 6 bits (0 para tipo R)
    - funct: campo de 6 bits, sólo tipo R
    - form: forma de operandos que acepta el parser
        'rd,rs,rt'    tres registros
        'rd,rs,imm'   dos registros e inmediato
        'rs,rt,label' rama condicional (registros en orden invertido)
        'label'       salto absoluto
        'rd,mem'      registro y acceso offset(base)
    """
    itype: str
    opcode: int
    funct: int = 0
    form: str = ""

DIRECTIVES = {".dw"}

SPEC: Dict[Mnemonic, ISpec] = {
    # Tipo R
    Mnemonic.ADD:  ISpec("R", 0b000000, funct=0b100000, form="rd,rs,rt"),
    Mnemonic.SUB:  ISpec("R", 0b000000, funct=0b100010, form="rd,rs,rt"),
    Mnemonic.AND:  ISpec("R", 0b000000, funct=0b100100, form="rd,rs,rt"),
    Mnemonic.OR:   ISpec("R", 0b000000, funct=0b100101, form="rd,rs,rt"),
    Mnemonic.SLT:  ISpec("R", 0b000000, funct=0b101010, form="rd,rs,rt"),
    # Tipo I
    Mnemonic.ADDI: ISpec("I", 0b001000, form="rd,rs,imm"),
    Mnemonic.BEQ:  ISpec("I", 0b000100, form="rs,rt,label"),
    Mnemonic.LB:   ISpec("I", 0b100000, form="rd,mem"),
    Mnemonic.SB:   ISpec("I", 0b101000, form="rd,mem"),
    # Tipo J
    Mnemonic.J:    ISpec("J", 0b000010, form="label"),
}

_NAMES = frozenset(m.value for m in Mnemonic)

def is_mnemonic(token: str) -> bool:
    return token in _NAMES

def spec(mnemonic: str) -> ISpec:
    """Devuelve la especificación de una instrucción por mnemónico (sensible a mayúsculas)."""
    if not is_mnemonic(mnemonic):
        raise KeyError(f"Instrucción desconocida: {mnemonic}")
    return SPEC[Mnemonic(mnemonic)]
