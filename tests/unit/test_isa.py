import pytest
from src.mips32_asm.isa import spec, is_mnemonic, Mnemonic, SPEC

def test_core_instructions_present():
    assert spec("add").funct == 0b100000
    assert spec("sub").funct == 0b100010
    assert spec("and").funct == 0b100100
    assert spec("or").funct == 0b100101
    assert spec("slt").funct == 0b101010
    assert spec("addi").opcode == 0b001000
    assert spec("beq").opcode == 0b000100
    assert spec("lb").opcode == 0b100000
    assert spec("sb").opcode == 0b101000
    assert spec("j").opcode == 0b000010

def test_every_mnemonic_has_a_spec():
    assert set(SPEC) == set(Mnemonic)
    assert {sp.itype for sp in SPEC.values()} == {"R", "I", "J"}

@pytest.mark.parametrize("name", ["mul", "ADD", "lw", ".dw", ""])
def test_unknown_mnemonic(name):
    assert not is_mnemonic(name)
    with pytest.raises(KeyError):
        spec(name)
