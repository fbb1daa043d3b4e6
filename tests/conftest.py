import numpy as np
import pytest

from field import FieldSpec

GF2 = FieldSpec(2, 1)
GF3 = FieldSpec(3, 1)
GF7 = FieldSpec(7, 1)
GF8 = FieldSpec(2, 3, (1, 1, 0, 1))
GF9 = FieldSpec(3, 2, (1, 0, 1))
GF16 = FieldSpec(2, 4, (1, 1, 0, 0, 1))
GF256 = FieldSpec(2, 8, (1, 1, 0, 1, 1, 0, 0, 0, 1))

SMALL_FIELDS = [GF2, GF3, GF7, GF8, GF9]


@pytest.fixture
def gf2() -> FieldSpec:
    return GF2


@pytest.fixture
def gf3() -> FieldSpec:
    return GF3


@pytest.fixture
def gf7() -> FieldSpec:
    return GF7


@pytest.fixture
def gf8() -> FieldSpec:
    """GF(2^3) modulo x^3 + x + 1."""
    return GF8


@pytest.fixture
def gf9() -> FieldSpec:
    """GF(3^2) modulo x^2 + 1."""
    return GF9


@pytest.fixture
def gf16() -> FieldSpec:
    return GF16


@pytest.fixture
def gf256() -> FieldSpec:
    """The AES field, modulo x^8 + x^4 + x^3 + x + 1."""
    return GF256


@pytest.fixture(params=SMALL_FIELDS, ids=str)
def any_field(request: pytest.FixtureRequest) -> FieldSpec:
    """Parametrize over the small prime and extension fields."""
    return request.param


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20240611)
