from __future__ import annotations
import argparse, logging, sys
from dataclasses import dataclass, field
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from .diagnostics import Diagnostic, from_exception
from .encoding import encode
from .errors import AsmError
from .lexer import tokenize
from .linker import resolve_labels
from .parser import parse
from .writers import to_hex_lines, to_bin_lines, write_hex, write_bin

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class AssembleResult:
    output: Optional[str]
    diagnostics: List[Diagnostic] = field(default_factory=list)
    words: List[str] = field(default_factory=list)   # binario de 32 bits

    @property
    def ok(self) -> bool:
        return self.output is not None and not self.diagnostics

def assemble_words(text: str) -> List[str]:
    """Tokeniza, parsea, resuelve etiquetas y codifica.
    Devuelve las palabras como cadenas binarias de 32 bits."""
    tokens = tokenize(text)
    symbols = parse(tokens)
    resolved = resolve_labels(symbols)
    words = encode(resolved)
    logger.debug("assemble: %d tokens, %d símbolos, %d palabras", len(tokens), len(symbols), len(words))
    return words

def assemble(text: str) -> str:
    """Ensambla el texto fuente y devuelve las palabras hex unidas por '\\n'.
    Propaga sin modificar el primer AsmError de cualquier etapa."""
    return "\n".join(to_hex_lines(assemble_words(text)))

def assemble_text(text: str, *, filename: str | None = None) -> AssembleResult:
    """Variante que nunca lanza AsmError: el fallo viaja como Diagnostic.
    Pensada para colaboradores que no deben caerse (CLI, front-end interactivo)."""
    try:
        words = assemble_words(text)
        return AssembleResult(output="\n".join(to_hex_lines(words)), words=words)
    except AsmError as ex:
        return AssembleResult(output=None, diagnostics=[from_exception(ex, file=filename)])

def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, markup=False, show_path=verbose)],
    )

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Ensamblador MIPS32 (subconjunto) a palabras hexadecimales")
    ap.add_argument("source", help="archivo .asm/.s de entrada")
    ap.add_argument("-o", "--output", help="archivo de salida (por defecto, salida estándar)")
    ap.add_argument("-f", "--format", choices=["hex", "bin"], default="hex",
                    help="formato del listado: hex (8 dígitos) o bin (32 bits ASCII)")
    ap.add_argument("-v", "--verbose", action="store_true", help="traza DEBUG de las etapas")
    args = ap.parse_args(argv)

    _setup_logging(args.verbose)

    try:
        with open(args.source, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as ex:
        print(f"ERROR: no pude leer {args.source}: {ex}", file=sys.stderr)
        return 2

    res = assemble_text(text, filename=args.source)
    if not res.ok:
        for d in res.diagnostics:
            print(d, file=sys.stderr)
        return 1
    words = res.words

    if args.output is None:
        lines = to_hex_lines(words) if args.format == "hex" else to_bin_lines(words)
        print("\n".join(lines))
        return 0

    try:
        if args.format == "hex":
            write_hex(words, args.output)
        else:
            write_bin(words, args.output)
    except OSError as ex:
        print(f"ERROR al escribir salidas: {ex}", file=sys.stderr)
        return 3

    logger.info("%d palabras -> %s", len(words), args.output)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
