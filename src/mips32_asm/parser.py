# src/mips32_asm/parser.py
from __future__ import annotations
import logging
from typing import List, Tuple

from .ast import Label, Directive, Operation, Symbol, Arg
from .errors import AsmSyntaxError
from .isa import spec, is_mnemonic, DIRECTIVES
from .lexer import COMMA
from .regs import reg_num
from .utils import parse_num

logger = logging.getLogger(__name__)

def _at(tokens: List[str], k: int) -> str:
    # fin de entrada se ve como token vacío: los helpers lo rechazan
    return tokens[k] if k < len(tokens) else ""

def _expect_comma(token: str) -> None:
    if token != COMMA:
        raise AsmSyntaxError(f"se esperaba una coma, encontrado: '{token}'")

def parse_label(token: str) -> str:
    """Valida un nombre de etiqueta (declaración o referencia)."""
    if not token:
        raise AsmSyntaxError("se esperaba una etiqueta, encontrado: ''")
    if token[0] in "0123456789":
        raise AsmSyntaxError(f"las etiquetas no pueden empezar con un número; encontrado: '{token}'")
    if ":" in token:
        raise AsmSyntaxError(f"carácter inválido en la etiqueta: '{token}'")
    return token

def parse_offset_access(token: str) -> Tuple[int, int]:
    """Descompone 'offset(base)' en (offset, registro base)."""
    open_p = token.find("(")
    close_p = token.find(")")
    if open_p == -1 or close_p == -1:
        raise AsmSyntaxError(f"se esperaba un acceso offset(registro), encontrado: '{token}'")
    offset = parse_num(token[:open_p])
    base = reg_num(token[open_p + 1:close_p])
    return offset, base

def _parse_operation(mnemonic: str, tokens: List[str], i: int) -> Tuple[List[Arg], int]:
    """Lee los operandos de `mnemonic` a partir de tokens[i+1].

    Devuelve (args, tokens consumidos tras el mnemónico).
    """
    form = spec(mnemonic).form
    def t(k: int) -> str:
        return _at(tokens, i + k)

    if form == "rd,rs,rt":
        rd = reg_num(t(1)); _expect_comma(t(2))
        rs = reg_num(t(3)); _expect_comma(t(4))
        rt = reg_num(t(5))
        return [rd, rs, rt], 5

    if form == "rd,rs,imm":
        rd = reg_num(t(1)); _expect_comma(t(2))
        rs = reg_num(t(3)); _expect_comma(t(4))
        imm = parse_num(t(5))
        return [rd, rs, imm], 5

    if form == "rs,rt,label":
        # registros guardados en orden inverso al fuente: [r2, r1, label]
        r2 = reg_num(t(3)); _expect_comma(t(2))
        r1 = reg_num(t(1)); _expect_comma(t(4))
        label = parse_label(t(5))
        return [r2, r1, label], 5

    if form == "label":
        return [parse_label(t(1))], 1

    if form == "rd,mem":
        rd = reg_num(t(1)); _expect_comma(t(2))
        offset, base = parse_offset_access(t(3))
        return [rd, base, offset], 3

    raise AsmSyntaxError(f"forma de operandos no soportada para '{mnemonic}': {form}")

def parse(tokens: List[str]) -> List[Symbol]:
    """
    Convierte la secuencia de tokens en símbolos, en orden de fuente:
      - Label(name)             para 'name:'
      - Directive('.dw', [n])   para '.dw n'
      - Operation(mnem, args)   para cada instrucción soportada

    Falla con el primer error (AsmSyntaxError o RangeError de registro).
    """
    symbols: List[Symbol] = []
    i = 0
    while i < len(tokens):
        token = tokens[i]

        # 1) 'label:'
        if token.endswith(":"):
            symbols.append(Label(name=parse_label(token[:-1])))
            i += 1
            continue

        # 2) .dw <num>
        if token in DIRECTIVES:
            symbols.append(Directive(name=token, args=[parse_num(_at(tokens, i + 1))]))
            i += 2
            continue

        # 3) operación
        if not is_mnemonic(token):
            raise AsmSyntaxError(f"instrucción desconocida: '{token}'")
        args, used = _parse_operation(token, tokens, i)
        symbols.append(Operation(mnemonic=token, args=args))
        i += used + 1

    logger.debug("parse: %d símbolos", len(symbols))
    return symbols
