from src.mips32_asm.diagnostics import error, from_exception
from src.mips32_asm.errors import RangeError

def test_error_str():
    d = error("etiqueta no encontrada: fin", kind="resolution", file="prog.asm", hint="declare 'fin:'")
    s = str(d)
    assert s.startswith("prog.asm: ")
    assert "ERROR[resolution]: etiqueta no encontrada: fin" in s
    assert "(pista: declare 'fin:')" in s

def test_from_exception_keeps_kind_and_message():
    d = from_exception(RangeError("fuera de rango"), file="x.s")
    assert d.severity == "error"
    assert d.kind == "range"
    assert d.message == "fuera de rango"
    assert str(d) == "x.s: ERROR[range]: fuera de rango"
