"""Literal encoding shared by the formula managers.

A variable is a non-negative integer. A literal packs a variable with a
polarity bit: ``2 * var`` is the positive literal and ``2 * var + 1`` the
negative one, so a literal can index occurrence tables directly.
"""


def mk_lit(var, negative=False):
    """Build the literal of ``var``, negative when ``negative`` is true."""
    if var < 0:
        raise ValueError(f"variable index must be non-negative, got {var}")
    return (var << 1) | int(bool(negative))


def lit_var(lit):
    """Return the variable of a literal."""
    return lit >> 1


def lit_sign(lit):
    """Return True when the literal is negative."""
    return bool(lit & 1)


def negate(lit):
    """Return the complementary literal."""
    return lit ^ 1


def from_dimacs(value):
    """Convert a signed, 1-based DIMACS literal into the internal encoding."""
    if value == 0:
        raise ValueError("0 is a clause terminator, not a literal")
    return mk_lit(abs(value) - 1, value < 0)


def to_dimacs(lit):
    """Convert an internal literal into a signed, 1-based DIMACS literal."""
    number = lit_var(lit) + 1
    return -number if lit_sign(lit) else number