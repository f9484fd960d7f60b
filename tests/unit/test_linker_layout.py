import pytest
from src.mips32_asm.lexer import tokenize
from src.mips32_asm.parser import parse
from src.mips32_asm.linker import first_pass, second_pass, resolve_labels
from src.mips32_asm.ast import Label, Directive, Operation
from src.mips32_asm.errors import ResolutionError

def _symbols(src: str):
    return parse(tokenize(src))

def test_labels_and_pc():
    src = """
    start:
      addi $1, $0, 1
      add  $2, $1, $1
    loop:
    again:
      beq  $2, $0, loop
      .dw 3
    end:
    """
    r = first_pass(_symbols(src))
    assert r.symtab == {"start": 0, "loop": 2, "again": 2, "end": 4}
    # las etiquetas desaparecen; la directiva ocupa un slot
    assert len(r.symbols) == 4
    assert not any(isinstance(s, Label) for s in r.symbols)
    assert isinstance(r.symbols[3], Directive)

def test_forward_and_backward_jumps_are_absolute():
    src = """
    start:
      j end
      add $1, $2, $3
      j start
    end:
      .dw 1
    """
    out = resolve_labels(_symbols(src))
    assert out[0] == Operation("j", [3])
    assert out[2] == Operation("j", [0])

@pytest.mark.parametrize("src, offset", [
    ("L: beq $1, $2, L", -1),                                   # su propio slot
    ("beq $1, $2, L\nL: add $1, $1, $1", 0),                    # la siguiente
    ("top: add $1,$1,$1\nadd $1,$1,$1\nbeq $0, $0, top", -3),   # hacia atrás
    ("beq $0, $0, far\n.dw 0\n.dw 0\nfar:", 2),                 # hacia adelante
])
def test_beq_offsets(src, offset):
    out = resolve_labels(_symbols(src))
    beq = next(s for s in out if isinstance(s, Operation) and s.mnemonic == "beq")
    assert beq.args[2] == offset

def test_beq_keeps_register_args():
    out = resolve_labels(_symbols("L: beq $1, $2, L"))
    assert out == [Operation("beq", [2, 1, -1])]

def test_duplicate_label():
    with pytest.raises(ResolutionError):
        first_pass(_symbols("L: add $1,$1,$1\nL: add $2,$2,$2"))

def test_distinct_labels_same_pc():
    r = first_pass(_symbols("a:\nb:\nadd $1, $1, $1"))
    assert r.symtab == {"a": 0, "b": 0}

@pytest.mark.parametrize("src", ["j nowhere", "beq $1, $2, nowhere\nsomewhere:"])
def test_label_not_found(src):
    with pytest.raises(ResolutionError):
        resolve_labels(_symbols(src))

def test_input_is_not_mutated():
    symbols = _symbols("L: j L\nbeq $1, $2, L")
    link = first_pass(symbols)
    second_pass(link)
    assert symbols[1] == Operation("j", ["L"])
    assert symbols[2] == Operation("beq", [2, 1, "L"])
