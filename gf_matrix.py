"""
Dense matrices over GF(p^m).

Entries live in a numpy object array of GFElement; every entry shares the
matrix's FieldSpec. Row operations mutate in place, everything else returns a
new Matrix.
"""
from typing import List, Optional, Sequence

import numpy as np

import elimination
import minors
from errors import DimensionMismatchError, FieldMismatchError, IndexOutOfRangeError
from field import DEFAULT_CHARACTERISTIC, DEFAULT_DEGREE, FieldSpec, resolve_field
from gf_element import GFElement
from rendering import pretty_matrix


class Matrix:
    def __init__(
        self,
        rows: int = 0,
        cols: int = 0,
        p: int = DEFAULT_CHARACTERISTIC,
        m: int = DEFAULT_DEGREE,
        modulus: Optional[Sequence[int]] = None,
        field: Optional[FieldSpec] = None,
    ):
        if rows < 0 or cols < 0:
            raise DimensionMismatchError(f"negative matrix shape {rows}x{cols}")
        self.field = resolve_field(p, m, modulus, field)
        self.data = np.empty((rows, cols), dtype=object)
        self.data.fill(self.field.zero())

    @classmethod
    def _wrap(cls, field: FieldSpec, data: np.ndarray) -> "Matrix":
        obj = cls.__new__(cls)
        obj.field = field
        obj.data = data
        return obj

    # -- named constructors -------------------------------------------------

    @classmethod
    def from_values(
        cls,
        grid,
        p: int = DEFAULT_CHARACTERISTIC,
        m: int = DEFAULT_DEGREE,
        modulus: Optional[Sequence[int]] = None,
        field: Optional[FieldSpec] = None,
    ) -> "Matrix":
        field = resolve_field(p, m, modulus, field)
        rows = [list(r) for r in grid]
        n_cols = len(rows[0]) if rows else 0
        data = np.empty((len(rows), n_cols), dtype=object)
        for i, row in enumerate(rows):
            if len(row) != n_cols:
                raise DimensionMismatchError(f"row {i} has {len(row)} entries, expected {n_cols}")
            for j, v in enumerate(row):
                data[i, j] = GFElement(int(v), field=field)
        return cls._wrap(field, data)

    @classmethod
    def from_elements(cls, grid: Sequence[Sequence[GFElement]], field: Optional[FieldSpec] = None) -> "Matrix":
        """
        Build from pre-built elements. The field comes from the first entry,
        or from `field`, or defaults to GF(2) for an empty grid.
        """
        rows = [list(r) for r in grid]
        n_cols = len(rows[0]) if rows else 0
        if field is None:
            field = rows[0][0].field if rows and n_cols else FieldSpec()
        data = np.empty((len(rows), n_cols), dtype=object)
        for i, row in enumerate(rows):
            if len(row) != n_cols:
                raise DimensionMismatchError(f"row {i} has {len(row)} entries, expected {n_cols}")
            for j, e in enumerate(row):
                if not isinstance(e, GFElement) or e.field != field:
                    raise FieldMismatchError(f"entry ({i}, {j}) = {e!r} is not an element of {field}")
                data[i, j] = e
        return cls._wrap(field, data)

    @classmethod
    def zero(cls, rows: int, cols: int, p: int = DEFAULT_CHARACTERISTIC, m: int = DEFAULT_DEGREE,
             modulus: Optional[Sequence[int]] = None, field: Optional[FieldSpec] = None) -> "Matrix":
        return cls(rows, cols, p, m, modulus, field)

    @classmethod
    def identity(cls, n: int, p: int = DEFAULT_CHARACTERISTIC, m: int = DEFAULT_DEGREE,
                 modulus: Optional[Sequence[int]] = None, field: Optional[FieldSpec] = None) -> "Matrix":
        out = cls(n, n, p, m, modulus, field)
        one = out.field.one()
        for i in range(n):
            out.data[i, i] = one
        return out

    @classmethod
    def random(cls, rows: int, cols: int, p: int = DEFAULT_CHARACTERISTIC, m: int = DEFAULT_DEGREE,
               modulus: Optional[Sequence[int]] = None, field: Optional[FieldSpec] = None,
               rng: Optional[np.random.Generator] = None) -> "Matrix":
        field = resolve_field(p, m, modulus, field)
        if rng is None:
            rng = np.random.default_rng()
        values = rng.integers(0, field.order, size=(rows, cols))
        return cls.from_values(values.tolist(), field=field) if rows else cls(0, cols, field=field)

    # -- shape and access ---------------------------------------------------

    @property
    def rows(self) -> int:
        return self.data.shape[0]

    @property
    def cols(self) -> int:
        return self.data.shape[1]

    @property
    def shape(self):
        return self.data.shape

    @property
    def p(self) -> int:
        return self.field.p

    @property
    def m(self) -> int:
        return self.field.m

    def _check_row(self, i: int) -> None:
        if not 0 <= i < self.rows:
            raise IndexOutOfRangeError(f"row index {i} out of range for {self.rows} rows")

    def _check_col(self, j: int) -> None:
        if not 0 <= j < self.cols:
            raise IndexOutOfRangeError(f"column index {j} out of range for {self.cols} columns")

    def _element(self, value) -> GFElement:
        if isinstance(value, GFElement):
            if value.field != self.field:
                raise FieldMismatchError(f"element of {value.field} used with a matrix over {self.field}")
            return value
        return GFElement(int(value), field=self.field)

    def at(self, i: int, j: int) -> GFElement:
        self._check_row(i)
        self._check_col(j)
        return self.data[i, j]

    def __getitem__(self, key) -> GFElement:
        i, j = key
        return self.at(i, j)

    def __setitem__(self, key, value) -> None:
        i, j = key
        self._check_row(i)
        self._check_col(j)
        self.data[i, j] = self._element(value)

    def get_row(self, i: int) -> List[GFElement]:
        self._check_row(i)
        return list(self.data[i, :])

    def get_col(self, j: int) -> List[GFElement]:
        self._check_col(j)
        return list(self.data[:, j])

    def set_row(self, i: int, row: Sequence) -> None:
        self._check_row(i)
        if len(row) != self.cols:
            raise DimensionMismatchError(f"row of length {len(row)} does not fit {self.cols} columns")
        for j, v in enumerate(row):
            self.data[i, j] = self._element(v)

    def set_col(self, j: int, col: Sequence) -> None:
        self._check_col(j)
        if len(col) != self.rows:
            raise DimensionMismatchError(f"column of length {len(col)} does not fit {self.rows} rows")
        for i, v in enumerate(col):
            self.data[i, j] = self._element(v)

    def copy(self) -> "Matrix":
        return self._wrap(self.field, self.data.copy())

    def to_list(self) -> List[List[int]]:
        return [[e.value for e in row] for row in self.data]

    def to_numpy(self) -> np.ndarray:
        return np.array(self.to_list(), dtype=object).reshape(self.shape)

    # -- elementary row operations -----------------------------------------

    def swap_rows(self, i: int, j: int) -> None:
        self._check_row(i)
        self._check_row(j)
        if i != j:
            self.data[[i, j]] = self.data[[j, i]]

    def multiply_row(self, i: int, scalar) -> None:
        self._check_row(i)
        s = self._element(scalar)
        for j in range(self.cols):
            self.data[i, j] = self.data[i, j] * s

    def add_row(self, dest: int, src: int, scalar) -> None:
        """
        dest += src * scalar
        """
        self._check_row(dest)
        self._check_row(src)
        s = self._element(scalar)
        for j in range(self.cols):
            self.data[dest, j] = self.data[dest, j] + self.data[src, j] * s

    # -- arithmetic ---------------------------------------------------------

    def _check_compatible(self, other: "Matrix") -> None:
        if other.field != self.field:
            raise FieldMismatchError(f"matrices over {self.field} and {other.field} cannot be combined")

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise DimensionMismatchError(f"cannot add {self.rows}x{self.cols} and {other.rows}x{other.cols}")
        self._check_compatible(other)
        return self._wrap(self.field, self.data + other.data)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise DimensionMismatchError(f"cannot subtract {other.rows}x{other.cols} from {self.rows}x{self.cols}")
        self._check_compatible(other)
        return self._wrap(self.field, self.data - other.data)

    def __neg__(self):
        out = self.copy()
        for i in range(self.rows):
            for j in range(self.cols):
                out.data[i, j] = -self.data[i, j]
        return out

    def _matmul(self, other: "Matrix") -> "Matrix":
        if self.cols != other.rows:
            raise DimensionMismatchError(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
            )
        self._check_compatible(other)
        out = Matrix(self.rows, other.cols, field=self.field)
        zero = self.field.zero()
        for i in range(self.rows):
            for j in range(other.cols):
                acc = zero
                for k in range(self.cols):
                    acc = acc + self.data[i, k] * other.data[k, j]
                out.data[i, j] = acc
        return out

    def _scale(self, scalar) -> "Matrix":
        s = self._element(scalar)
        out = self.copy()
        for i in range(self.rows):
            for j in range(self.cols):
                out.data[i, j] = self.data[i, j] * s
        return out

    def _apply(self, vec: Sequence) -> List[GFElement]:
        if len(vec) != self.cols:
            raise DimensionMismatchError(f"vector of length {len(vec)} does not match {self.cols} columns")
        v = [self._element(x) for x in vec]
        out = []
        for i in range(self.rows):
            acc = self.field.zero()
            for j in range(self.cols):
                acc = acc + self.data[i, j] * v[j]
            out.append(acc)
        return out

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self._matmul(other)
        if isinstance(other, (GFElement, int, np.integer)):
            return self._scale(other)
        if isinstance(other, (list, tuple, np.ndarray)):
            return self._apply(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (GFElement, int, np.integer)):
            return self._scale(other)
        return NotImplemented

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._matmul(other)

    def transpose(self) -> "Matrix":
        return self._wrap(self.field, self.data.T.copy())

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    def hstack(self, other: "Matrix") -> "Matrix":
        if self.rows != other.rows:
            raise DimensionMismatchError(f"cannot join {self.rows} rows with {other.rows} rows")
        self._check_compatible(other)
        return self._wrap(self.field, np.concatenate([self.data, other.data], axis=1))

    def submatrix(self, row_indices: Sequence[int], col_indices: Sequence[int]) -> "Matrix":
        for i in row_indices:
            self._check_row(i)
        for j in col_indices:
            self._check_col(j)
        rows = np.asarray(row_indices, dtype=int)
        cols = np.asarray(col_indices, dtype=int)
        return self._wrap(self.field, self.data[np.ix_(rows, cols)].copy())

    # -- comparison and display ---------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape or self.field != other.field:
            return False
        return all(a == b for a, b in zip(self.data.flat, other.data.flat))

    __hash__ = None

    def __str__(self) -> str:
        return pretty_matrix(self)

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()}, field={self.field})"

    # -- linear algebra -----------------------------------------------------

    def forward_gauss(self, educational: bool = False) -> "elimination.GaussResult":
        return elimination.forward_gauss(self, educational)

    def backward_gauss(self, educational: bool = False) -> "elimination.GaussResult":
        return elimination.backward_gauss(self, educational)

    def reduced_row_echelon_form(self, educational: bool = False) -> "elimination.GaussResult":
        return elimination.reduced_row_echelon_form(self, educational)

    rref = reduced_row_echelon_form

    def rank(self) -> int:
        return elimination.rank(self)

    def determinant(self) -> GFElement:
        return elimination.determinant(self)

    def is_invertible(self) -> bool:
        return elimination.is_invertible(self)

    def inverse(self, educational: bool = False) -> Optional["Matrix"]:
        return elimination.inverse(self, educational)

    def find_invertible_submatrix(self, max_candidates: Optional[int] = None) -> Optional["minors.SubmatrixInfo"]:
        return minors.find_invertible_submatrix(self, max_candidates)

    def find_maximal_invertible_submatrix(self) -> Optional["minors.SubmatrixInfo"]:
        return minors.find_maximal_invertible_submatrix(self)
