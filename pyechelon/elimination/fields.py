"""
Scalar fields for the generic elimination path.

A ScalarField bundles the capability set the algorithms need: the two
identities, the four arithmetic operations and a zero-test. Passing the
operations explicitly (rather than relying on operators alone) lets the
same elimination code run over exact arithmetic such as rationals or
integers modulo a prime.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Callable
import operator


@dataclass(frozen=True)
class ScalarField:
    """
    Arithmetic over the entries of a matrix.

    Attributes:
        name: Human-readable identifier (reported in Result.info)
        zero: Additive identity
        one: Multiplicative identity
        add, sub, mul, div: Binary operations
        is_zero: Zero-test used for pivot selection
    """
    name: str
    zero: Any
    one: Any
    add: Callable[[Any, Any], Any]
    sub: Callable[[Any, Any], Any]
    mul: Callable[[Any, Any], Any]
    div: Callable[[Any, Any], Any]
    is_zero: Callable[[Any], bool]


def _equals_zero(value: Any) -> bool:
    return value == 0


# Python operators with literal 0/1 identities. Works for int, float,
# Fraction, Decimal and numpy scalars; `1 / x` keeps the operand's type
# for everything except int.
OPERATOR_FIELD = ScalarField(
    name='operator',
    zero=0,
    one=1,
    add=operator.add,
    sub=operator.sub,
    mul=operator.mul,
    div=operator.truediv,
    is_zero=_equals_zero,
)


def _q_add(a: Any, b: Any) -> Fraction:
    return Fraction(a) + Fraction(b)


def _q_sub(a: Any, b: Any) -> Fraction:
    return Fraction(a) - Fraction(b)


def _q_mul(a: Any, b: Any) -> Fraction:
    return Fraction(a) * Fraction(b)


def _q_div(a: Any, b: Any) -> Fraction:
    return Fraction(a) / Fraction(b)


# Exact rationals. Operands are coerced to Fraction first so that a stray
# float entry does not silently turn the row back into floating point.
RATIONAL_FIELD = ScalarField(
    name='rational',
    zero=Fraction(0),
    one=Fraction(1),
    add=_q_add,
    sub=_q_sub,
    mul=_q_mul,
    div=_q_div,
    is_zero=_equals_zero,
)


def _is_prime(p: int) -> bool:
    if p < 2:
        return False
    if p < 4:
        return True
    if p % 2 == 0:
        return False
    k = 3
    while k * k <= p:
        if p % k == 0:
            return False
        k += 2
    return True


def prime_field(p: int) -> ScalarField:
    """
    Integers modulo a prime p.

    Entries are plain ints. Results of arithmetic are reduced into
    range(p); entries the elimination never touches keep their original
    value, so pass entries already reduced if a canonical matrix is wanted.

    Primality is checked by trial division, so this is meant for small
    moduli; validating a p much above 10**12 is slow.

    Args:
        p: Field characteristic, must be prime

    Returns:
        ScalarField for GF(p)

    Raises:
        ValueError: If p is not a prime integer
    """
    if isinstance(p, bool) or not isinstance(p, int) or not _is_prime(p):
        raise ValueError(f"p must be a prime integer, got {p!r}")

    def add(a: int, b: int) -> int:
        return (a + b) % p

    def sub(a: int, b: int) -> int:
        return (a - b) % p

    def mul(a: int, b: int) -> int:
        return (a * b) % p

    def div(a: int, b: int) -> int:
        return (a * pow(b, -1, p)) % p

    def is_zero(a: int) -> bool:
        return a % p == 0

    return ScalarField(
        name=f'GF({p})',
        zero=0,
        one=1,
        add=add,
        sub=sub,
        mul=mul,
        div=div,
        is_zero=is_zero,
    )


# The two-element field; subtraction is XOR and multiplication is AND.
GF2 = prime_field(2)
