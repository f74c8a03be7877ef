import pytest

from cnfcache.literals import from_dimacs, lit_sign, lit_var, mk_lit, negate, to_dimacs


def test_first_variable_encoding():
    assert mk_lit(0) == 0
    assert mk_lit(0, True) == 1


@pytest.mark.parametrize("value", [1, -1, 2, -2, 7, -7, 1000, -1000])
def test_dimacs_round_trip(value):
    assert to_dimacs(from_dimacs(value)) == value


@pytest.mark.parametrize("var", [0, 1, 5, 123])
def test_var_and_sign_of_built_literal(var):
    positive = mk_lit(var)
    negative = mk_lit(var, True)
    assert lit_var(positive) == var
    assert lit_var(negative) == var
    assert lit_sign(positive) is False
    assert lit_sign(negative) is True


@pytest.mark.parametrize("lit", range(10))
def test_negate_is_involution(lit):
    assert negate(negate(lit)) == lit
    assert lit_var(negate(lit)) == lit_var(lit)
    assert lit_sign(negate(lit)) != lit_sign(lit)


def test_negation_matches_dimacs_sign():
    assert to_dimacs(negate(from_dimacs(4))) == -4


def test_zero_is_not_a_literal():
    with pytest.raises(ValueError):
        from_dimacs(0)


def test_negative_variable_rejected():
    with pytest.raises(ValueError):
        mk_lit(-1)