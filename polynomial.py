"""
Dense polynomial helpers over GF(p).

Polynomials are lists of ints, index i holding the coefficient of x^i.
"""
from typing import List, Sequence, Tuple

from errors import GFZeroDivisionError, InverseNotFoundError


def trim(a: Sequence[int]) -> List[int]:
    out = list(a)
    while len(out) > 1 and out[-1] == 0:
        out.pop()
    if not out:
        out.append(0)
    return out


def is_zero_poly(a: Sequence[int]) -> bool:
    return all(c == 0 for c in a)


def scalar_inverse(a: int, p: int) -> int:
    try:
        return pow(int(a % p), -1, p)
    except ValueError as exc:
        raise InverseNotFoundError(f"{a} has no inverse modulo {p}") from exc


def poly_sub(a: Sequence[int], b: Sequence[int], p: int) -> List[int]:
    n = max(len(a), len(b))
    out = [0] * n
    for i in range(n):
        x = a[i] if i < len(a) else 0
        y = b[i] if i < len(b) else 0
        out[i] = (x - y) % p
    return out


def poly_mul(a: Sequence[int], b: Sequence[int], p: int) -> List[int]:
    if not a or not b:
        return [0]
    out = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        if x == 0:
            continue
        for j, y in enumerate(b):
            out[i + j] = (out[i + j] + x * y) % p
    return out


def poly_divmod(a: Sequence[int], b: Sequence[int], p: int) -> Tuple[List[int], List[int]]:
    """
    Long division of a by b over GF(p), returns (quotient, remainder).
    """
    divisor = trim([c % p for c in b])
    if divisor == [0]:
        raise GFZeroDivisionError("polynomial division by zero")
    remainder = trim([c % p for c in a])
    lead_inv = scalar_inverse(divisor[-1], p)
    d = len(divisor)
    if len(remainder) < d:
        return [0], remainder

    quotient = [0] * (len(remainder) - d + 1)
    while len(remainder) >= d and not is_zero_poly(remainder):
        shift = len(remainder) - d
        coeff = (remainder[-1] * lead_inv) % p
        quotient[shift] = coeff
        for i in range(d):
            remainder[shift + i] = (remainder[shift + i] - coeff * divisor[i]) % p
        remainder = trim(remainder)
    return trim(quotient), remainder


def poly_mod(a: Sequence[int], b: Sequence[int], p: int) -> List[int]:
    return poly_divmod(a, b, p)[1]
