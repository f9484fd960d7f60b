import pytest
from src.mips32_asm.utils import (
    parse_num, u32, sign_extend, is_unsigned_nbit, is_signed_nbit,
    twos_complement, to_bin, to_hex32,
)
from src.mips32_asm.errors import AsmSyntaxError, RangeError

@pytest.mark.parametrize("src, expected", [
    ("0", 0), ("42", 42), ("-7", -7), ("007", 7), ("-0", 0),
])
def test_parse_num(src, expected):
    assert parse_num(src) == expected

@pytest.mark.parametrize("src", ["", "-", "+5", "0x10", "1.5", "12a", " 1", "--1"])
def test_parse_num_rejects(src):
    with pytest.raises(AsmSyntaxError):
        parse_num(src)

def test_u32_and_formats():
    assert u32(-1) == 0xFFFFFFFF
    assert to_bin(5, 8) == "00000101"
    assert to_bin(0, 5) == "00000"
    assert to_hex32(0x1234) == "00001234"
    assert to_hex32(0xFFFFFFFF) == "ffffffff"
    assert to_hex32(-1) == "ffffffff"

def test_sign_extend():
    assert sign_extend(0x80, 8) == -128
    assert sign_extend(0x7F, 8) == 127
    assert sign_extend(0xFFFF, 16) == -1

def test_twos_complement():
    assert twos_complement(-1, 16) == 0xFFFF
    assert twos_complement(-(1 << 15), 16) == 0x8000
    assert twos_complement(5, 16) == 5

def test_nbit_checks():
    assert is_unsigned_nbit(31, 5)
    assert not is_unsigned_nbit(32, 5)
    assert not is_unsigned_nbit(-1, 5)
    assert is_signed_nbit(32767, 16)
    assert is_signed_nbit(-32768, 16)
    assert not is_signed_nbit(32768, 16)
    assert not is_signed_nbit(-32769, 16)
    with pytest.raises(ValueError):
        is_signed_nbit(0, 0)

@pytest.mark.parametrize("src", ["9" * 5000, "-" + "1" * 5000])
def test_parse_num_huge_literal_is_range_error(src):
    with pytest.raises(RangeError):
        parse_num(src)
