"""
Text forms of field elements and matrices.

Elements render as exponent-form polynomials ("x^2 + 2x + 1") or, over a
prime field, as the bare residue. Matrices use NTL's bracketed stream layout
with integer element values, one row per line.
"""
import re
from typing import List

from errors import ParseError
from field import FieldSpec
from polynomial import poly_mod

_TERM = re.compile(r"^(\d*)\*?(x(?:\^(\d+))?)?$")
_ROW = re.compile(r"\[([^\[\]]*)\]")


def format_element(elem) -> str:
    coeffs = elem.coeffs
    if elem.m == 1:
        return str(coeffs[0])
    terms = []
    for i in range(len(coeffs) - 1, -1, -1):
        c = coeffs[i]
        if c == 0:
            continue
        term = str(c) if (c != 1 or i == 0) else ""
        if i > 0:
            term += "x"
            if i > 1:
                term += f"^{i}"
        terms.append(term)
    if not terms:
        return "0"
    return " + ".join(terms)


def parse_element(text: str, field: FieldSpec):
    """
    Inverse of format_element; also accepts "2*x^3" style terms.
    """
    text = text.strip()
    if not text:
        raise ParseError("empty element text")
    coeffs: List[int] = [0]
    for raw in text.split("+"):
        term = raw.replace(" ", "")
        match = _TERM.match(term)
        if not term or match is None or (not match.group(1) and not match.group(2)):
            raise ParseError(f"bad polynomial term {raw!r} in {text!r}")
        coeff = int(match.group(1)) if match.group(1) else 1
        if match.group(2) is None:
            power = 0
        elif match.group(3) is None:
            power = 1
        else:
            power = int(match.group(3))
        if power >= len(coeffs):
            coeffs.extend([0] * (power + 1 - len(coeffs)))
        coeffs[power] += coeff
    if field.m == 1 and len(coeffs) == 1:
        return field.element(coeffs[0])
    return field.from_coeffs(poly_mod(coeffs, field.modulus, field.p))


def format_matrix(mat) -> str:
    """
    NTL layout. A matrix without rows prints as "[]" whatever its column
    count; pass cols to parse_matrix to restore it.
    """
    rows = ["[" + " ".join(str(e.value) for e in mat.get_row(i)) + "]" for i in range(mat.rows)]
    if not rows:
        return "[]"
    return "[" + "\n".join(rows) + "\n]"


def parse_matrix(text: str, field: FieldSpec, cols: int = 0):
    """
    Parse NTL's mat_ZZ_p << format, one bracketed row per line or rows run
    together as [[1 0 1][0 1 1]]. Anything outside the brackets is an error.
    `cols` sets the width of a matrix with no rows.
    """
    from gf_matrix import Matrix

    body = text.strip()
    if len(body) < 2 or body[0] != "[" or body[-1] != "]":
        raise ParseError(f"matrix text must be enclosed in brackets: {text!r}")
    body = body[1:-1]

    rows = []
    pos = 0
    for match in _ROW.finditer(body):
        if body[pos:match.start()].strip():
            raise ParseError(f"unexpected text {body[pos:match.start()].strip()!r} in matrix")
        pos = match.end()
        try:
            rows.append([int(x) for x in match.group(1).split()])
        except ValueError as exc:
            raise ParseError(f"bad matrix row {match.group(0)!r}") from exc
    if body[pos:].strip():
        raise ParseError(f"unexpected text {body[pos:].strip()!r} in matrix")

    if not rows:
        return Matrix(0, cols, field=field)
    return Matrix.from_values(rows, field=field)


def pretty_matrix(mat) -> str:
    lines = []
    for i in range(mat.rows):
        cells = " ".join(f"{str(e):>4}" for e in mat.get_row(i))
        lines.append(f"[{cells} ]")
    return "\n".join(lines)
