'''
taxonomía de errores del ensamblador (fail-fast, un único error por llamada)
'''

from __future__ import annotations
from typing import Literal

ErrorKind = Literal["lex", "syntax", "resolution", "range", "internal"]

class AsmError(Exception):
    """Error base de todas las etapas del pipeline.

    Cada subclase fija `kind`; el mensaje es legible por humanos y los
    colaboradores (CLI, front-end interactivo) lo muestran tal cual.
    """
    kind: ErrorKind = "internal"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class LexError(AsmError):
    """Estado imposible del tokenizador (token vacío tras el escaneo)."""
    kind = "lex"

class AsmSyntaxError(AsmError):
    """Literal mal formado, coma ausente o mnemónico desconocido."""
    kind = "syntax"

class ResolutionError(AsmError):
    """Etiqueta duplicada o referencia a etiqueta no declarada."""
    kind = "resolution"

class RangeError(AsmError):
    """Registro, inmediato, destino de salto o valor .dw fuera de rango."""
    kind = "range"

class InternalError(AsmError):
    """Combinación símbolo/operación que las etapas previas debían excluir."""
    kind = "internal"
