'''
helpers numéricos (literales, rangos n-bit, complemento a dos, binario fijo)
'''

from __future__ import annotations
import re

from .errors import AsmSyntaxError, RangeError

# Máscara para 32 bits sin signo
U32_MASK = 0xFFFFFFFF

# Entero decimal con signo opcional: sólo dígitos ASCII
DEC_NUM_RE = re.compile(r"^-?[0-9]+$")

def parse_num(token: str) -> int:
    """Convierte un literal entero ('-'? dígitos); AsmSyntaxError si está mal formado."""
    if not DEC_NUM_RE.match(token):
        raise AsmSyntaxError(f"se esperaba un número, encontrado: '{token}'")
    try:
        return int(token)
    except ValueError:
        # límite de dígitos de int(); ningún campo admite un valor así
        raise RangeError(f"número demasiado largo ({len(token)} caracteres)") from None

def u32(x: int) -> int:
    """Fuerza el valor al rango de 32 bits sin signo."""
    return x & U32_MASK

def sign_extend(x: int, bits: int) -> int:
    """Extiende el signo de x, asumiendo que cabe en 'bits' bits (complemento a dos)."""
    if bits <= 0:
        raise ValueError("bits debe ser positivo")
    mask = (1 << bits) - 1
    x &= mask
    sign_bit = 1 << (bits - 1)
    return (x ^ sign_bit) - sign_bit

def is_unsigned_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [0, 2^n) (sin signo de n bits)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    return 0 <= x < (1 << n)

def is_signed_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [-(2^(n-1)), 2^(n-1)) (con signo de n bits)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    return -(1 << (n - 1)) <= x < (1 << (n - 1))

def twos_complement(x: int, bits: int) -> int:
    """Codificación sin signo de x en complemento a dos de 'bits' bits."""
    return x + (1 << bits) if x < 0 else x

def to_bin(x: int, width: int) -> str:
    """Binario sin signo de ancho fijo, relleno con ceros a la izquierda."""
    return format(x, f"0{width}b")

def to_hex32(x: int) -> str:
    """Representación hexadecimal de 32 bits (8 dígitos en minúscula)."""
    return format(u32(x), "08x")
