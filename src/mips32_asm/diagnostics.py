'''
clase Diagnostic y helpers (tipo de error, archivo, pista)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

from .errors import AsmError, ErrorKind

# El pipeline falla en el primer problema: sólo hay diagnósticos de error
Severity = Literal["error"]

_SEV_TO_LABEL = {
    "error": "ERROR",
}

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Los tokens no llevan posición, así que la ubicación se limita al archivo.
    `kind` conserva la categoría del error que lo produjo (lex, syntax, resolution,
    range, internal) para que quien lo muestre pueda distinguirlos.
    """
    severity: Severity
    message: str
    kind: Optional[ErrorKind] = None
    hint: Optional[str] = None
    file: Optional[str] = None

    def __str__(self) -> str:
        loc = f"{self.file}: " if self.file is not None else ""
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        if self.kind:
            sev += f"[{self.kind}]"
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, kind: ErrorKind | None = None,
          file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, kind, hint, file)

def from_exception(ex: AsmError, *, file: str | None = None,
                   hint: str | None = None) -> Diagnostic:
    """Convierte un AsmError en un diagnóstico de error conservando su tipo."""
    return error(ex.message, kind=ex.kind, file=file, hint=hint)
