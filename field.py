"""
Field descriptor for GF(p^m).

A FieldSpec binds the characteristic, the extension degree and the
irreducible modulus together; two fields are the same only when all three
agree.
"""
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np
from sympy import Poly, Symbol, isprime

from errors import ConfigurationError
from logging_utils import get_logger

DEFAULT_CHARACTERISTIC = 2
DEFAULT_DEGREE = 1

PRIME_FIELD_MODULUS = (0, 1)


def to_digits(value: int, p: int, m: int) -> List[int]:
    """
    Base-p digits of value, least significant first, cut to m digits.
    """
    digits = [0] * m
    for i in range(m):
        if value == 0:
            break
        digits[i] = value % p
        value //= p
    return digits


def from_digits(digits: Sequence[int], p: int) -> int:
    out = 0
    for c in reversed(digits):
        out = out * p + c
    return out


def _sympy_poly(coeffs: Sequence[int], p: int) -> Poly:
    x = Symbol("x")
    return Poly(list(reversed(coeffs)), x, modulus=p)


def is_irreducible(coeffs: Sequence[int], p: int) -> bool:
    return bool(_sympy_poly(coeffs, p).is_irreducible)


@lru_cache(maxsize=None)
def default_modulus(p: int, m: int) -> Tuple[int, ...]:
    """
    First monic irreducible polynomial of degree m over GF(p), lower
    coefficients enumerated as base-p digits of 0, 1, 2, ...
    """
    if not isprime(p):
        raise ConfigurationError(f"no irreducible polynomial search over GF({p}): {p} is not prime")
    for n in range(p ** m):
        coeffs = to_digits(n, p, m) + [1]
        if is_irreducible(coeffs, p):
            get_logger("gf.field").debug(f"default modulus for GF({p}^{m}): {coeffs}")
            return tuple(coeffs)
    raise ConfigurationError(f"no irreducible polynomial of degree {m} over GF({p})")


@dataclass(frozen=True)
class FieldSpec:
    p: int = DEFAULT_CHARACTERISTIC
    m: int = DEFAULT_DEGREE
    modulus: Optional[Tuple[int, ...]] = None

    def __post_init__(self):
        p, m = self.p, self.m
        if p < 2:
            raise ConfigurationError(f"characteristic must be >= 2, got {p}")
        if m < 1:
            raise ConfigurationError(f"extension degree must be >= 1, got {m}")
        object.__setattr__(self, "p", int(p))
        object.__setattr__(self, "m", int(m))

        if m == 1:
            modulus = PRIME_FIELD_MODULUS
        elif self.modulus is None:
            modulus = default_modulus(p, m)
        else:
            modulus = tuple(int(c) % p for c in self.modulus)
            if len(modulus) != m + 1:
                raise ConfigurationError(
                    f"modulus of GF({p}^{m}) needs {m + 1} coefficients, got {len(modulus)}"
                )
            if modulus[-1] == 0:
                raise ConfigurationError(f"modulus {list(modulus)} has a zero leading coefficient mod {p}")
        object.__setattr__(self, "modulus", modulus)

    @classmethod
    def create(cls, p: int = DEFAULT_CHARACTERISTIC, m: int = DEFAULT_DEGREE,
               modulus: Optional[Sequence[int]] = None, check: bool = False) -> "FieldSpec":
        field = cls(p, m, None if modulus is None else tuple(modulus))
        if check:
            field.validate()
        return field

    def validate(self) -> None:
        """
        Full mathematical check: p prime and the modulus irreducible over GF(p).
        """
        if not isprime(self.p):
            raise ConfigurationError(f"characteristic {self.p} is not prime")
        if self.m > 1 and not is_irreducible(self.modulus, self.p):
            raise ConfigurationError(f"modulus {list(self.modulus)} is reducible over GF({self.p})")

    @property
    def order(self) -> int:
        return self.p ** self.m

    def __str__(self) -> str:
        if self.m == 1:
            return f"GF({self.p})"
        return f"GF({self.p}^{self.m})"

    def element(self, value=0):
        from gf_element import GFElement

        return GFElement(value, field=self)

    def from_coeffs(self, coeffs: Sequence[int]):
        from gf_element import GFElement

        return GFElement(list(coeffs), field=self)

    def zero(self):
        return self.element(0)

    def one(self):
        return self.element(1)

    def elements(self) -> Iterator:
        for v in range(self.order):
            yield self.element(v)

    def random_element(self, rng: Optional[np.random.Generator] = None):
        if rng is None:
            rng = np.random.default_rng()
        return self.element(int(rng.integers(0, self.order)))


def resolve_field(p: int = DEFAULT_CHARACTERISTIC, m: int = DEFAULT_DEGREE,
                  modulus: Optional[Sequence[int]] = None,
                  field: Optional[FieldSpec] = None) -> FieldSpec:
    if field is not None:
        return field
    return FieldSpec(p, m, None if modulus is None else tuple(modulus))
