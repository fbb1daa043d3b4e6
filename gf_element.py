"""
Elements of the finite field GF(p^m).

An element is a polynomial of degree < m over GF(p), kept in canonical form
modulo the irreducible polynomial of its field. Elements are immutable; every
operation returns a new element.
"""
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from errors import (
    ConfigurationError,
    FieldMismatchError,
    GFZeroDivisionError,
    InverseNotFoundError,
)
from field import (
    DEFAULT_CHARACTERISTIC,
    DEFAULT_DEGREE,
    FieldSpec,
    from_digits,
    resolve_field,
    to_digits,
)
from polynomial import (
    is_zero_poly,
    poly_divmod,
    poly_mod,
    poly_mul,
    poly_sub,
    scalar_inverse,
    trim,
)
from rendering import format_element

_INT_TYPES = (int, np.integer)


class GFElement:
    __slots__ = ("_field", "_coeffs")

    def __init__(
        self,
        value: Union[int, Sequence[int], "GFElement"] = 0,
        p: int = DEFAULT_CHARACTERISTIC,
        m: int = DEFAULT_DEGREE,
        modulus: Optional[Sequence[int]] = None,
        field: Optional[FieldSpec] = None,
    ):
        field = resolve_field(p, m, modulus, field)
        self._field = field
        if isinstance(value, GFElement):
            if value.field != field:
                raise FieldMismatchError(f"cannot convert an element of {value.field} into {field}")
            self._coeffs = value.coeffs
        elif isinstance(value, _INT_TYPES):
            self._coeffs = self._coeffs_from_int(int(value))
        else:
            self._coeffs = self._canonical(value)

    @classmethod
    def _make(cls, field: FieldSpec, coeffs: Tuple[int, ...]) -> "GFElement":
        obj = cls.__new__(cls)
        obj._field = field
        obj._coeffs = coeffs
        return obj

    def _coeffs_from_int(self, value: int) -> Tuple[int, ...]:
        p, m = self._field.p, self._field.m
        if m == 1:
            return (value % p,)
        if value < 0:
            raise ConfigurationError(f"negative value {value} has no base-{p} expansion")
        return tuple(to_digits(value, p, m))

    def _canonical(self, coeffs: Sequence[int]) -> Tuple[int, ...]:
        """
        Coefficients mod p, cut or zero-padded to m. Terms of degree >= m are
        dropped, not reduced; use _reduce for full polynomials.
        """
        p, m = self._field.p, self._field.m
        kept = [int(c) % p for c in coeffs][:m]
        return tuple(kept + [0] * (m - len(kept)))

    def _reduce(self, poly: Sequence[int]) -> Tuple[int, ...]:
        p, m = self._field.p, self._field.m
        rem = poly_mod([int(c) % p for c in poly], self._field.modulus, p)
        return tuple(rem + [0] * (m - len(rem)))

    # -- accessors --------------------------------------------------------

    @property
    def field(self) -> FieldSpec:
        return self._field

    @property
    def coeffs(self) -> Tuple[int, ...]:
        return self._coeffs

    @property
    def p(self) -> int:
        return self._field.p

    @property
    def m(self) -> int:
        return self._field.m

    @property
    def modulus(self) -> Tuple[int, ...]:
        return self._field.modulus

    @property
    def value(self) -> int:
        return from_digits(self._coeffs, self._field.p)

    def __int__(self) -> int:
        return self.value

    def is_zero(self) -> bool:
        return is_zero_poly(self._coeffs)

    def is_one(self) -> bool:
        return self._coeffs[0] == 1 and is_zero_poly(self._coeffs[1:])

    # -- arithmetic -------------------------------------------------------

    def _coerce(self, other) -> Optional["GFElement"]:
        if isinstance(other, GFElement):
            if other._field != self._field:
                raise FieldMismatchError(f"elements of {self._field} and {other._field} cannot be combined")
            return other
        if isinstance(other, _INT_TYPES):
            return GFElement(int(other), field=self._field)
        return None

    def __add__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        p = self._field.p
        return self._make(self._field, tuple((a + b) % p for a, b in zip(self._coeffs, o._coeffs)))

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        p = self._field.p
        return self._make(self._field, tuple((a - b) % p for a, b in zip(self._coeffs, o._coeffs)))

    def __rsub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __neg__(self):
        p = self._field.p
        return self._make(self._field, tuple((p - c) % p for c in self._coeffs))

    def __mul__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        product = poly_mul(self._coeffs, o._coeffs, self._field.p)
        return self._make(self._field, self._reduce(product))

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        if o.is_zero():
            raise GFZeroDivisionError(f"division by zero in {self._field}")
        return self * o.inverse()

    def __rtruediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def __pow__(self, exponent: int):
        if not isinstance(exponent, _INT_TYPES):
            return NotImplemented
        exponent = int(exponent)
        base = self
        if exponent < 0:
            base = self.inverse()
            exponent = -exponent
        result = self._field.one()
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def inverse(self) -> "GFElement":
        """
        Multiplicative inverse.

        GF(p): inverse of the residue modulo p. GF(p^m): extended Euclidean
        algorithm on (modulus, self) over GF(p), keeping only the Bezout
        coefficient of self.
        """
        if self.is_zero():
            raise GFZeroDivisionError(f"zero has no inverse in {self._field}")
        p, m = self._field.p, self._field.m
        if m == 1:
            return self._make(self._field, (scalar_inverse(self._coeffs[0], p),))

        r0, r1 = list(self._field.modulus), trim(self._coeffs)
        s0, s1 = [0], [1]
        while not is_zero_poly(r1):
            q, r = poly_divmod(r0, r1, p)
            r0, r1 = r1, r
            s0, s1 = s1, poly_sub(s0, poly_mul(q, s1, p), p)

        gcd = trim(r0)
        if len(gcd) != 1:
            raise InverseNotFoundError(
                f"{self} is not invertible: modulus {list(self._field.modulus)} is reducible"
            )
        scale = scalar_inverse(gcd[0], p)
        return self._make(self._field, self._reduce([c * scale for c in s0]))

    # -- comparison -------------------------------------------------------

    def __eq__(self, other) -> bool:
        if isinstance(other, GFElement):
            return self._field == other._field and self._coeffs == other._coeffs
        if isinstance(other, _INT_TYPES):
            # exact integer encoding only, so 3 == GF(7)(3) but 10 != GF(7)(3)
            return self.value == int(other)
        return NotImplemented

    def __hash__(self) -> int:
        # must agree with int equality; elements of distinct fields may collide
        return hash(self.value)

    def __str__(self) -> str:
        return format_element(self)

    def __repr__(self) -> str:
        f = self._field
        if f.m == 1:
            return f"GFElement({self.value}, p={f.p})"
        return f"GFElement({self.value}, p={f.p}, m={f.m}, modulus={list(f.modulus)})"
