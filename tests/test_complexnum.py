import pytest

from dsakit.complexnum import ComplexPair


def test_default_is_zero():
    assert ComplexPair() == ComplexPair(0, 0)


def test_negation():
    assert -ComplexPair(3, 5) == ComplexPair(-3, -5)


def test_double_negation_is_identity():
    value = ComplexPair(4, -8)
    assert -(-value) == value


def test_addition_pinned():
    assert ComplexPair(3, 6) + ComplexPair(4, 8) == ComplexPair(7, 14)


def test_addition_with_negation_is_zero():
    value = ComplexPair(3, 5)
    assert value + (-value) == ComplexPair()


def test_addition_commutes_and_zero_is_identity():
    x, y = ComplexPair(3, 5), ComplexPair(-4, 6)
    assert x + y == y + x
    assert x + ComplexPair() == x


def test_str_format():
    assert str(ComplexPair(3, 5)) == "a=3b= 5"


def test_add_non_pair_raises():
    with pytest.raises(TypeError):
        ComplexPair(1, 2) + 3