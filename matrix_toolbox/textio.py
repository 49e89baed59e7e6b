# textio.py
"""
Plain-text matrix persistence.

Format:
    rows cols
    v00 v01 ... v0(cols-1)
    ...
Values are whitespace separated and written with repr(float), which is the
shortest text that reads back to the identical double.
"""
import logging
import os
from typing import List, Union

from .errors import MatrixFormatError
from .matrix import Matrix

LOG = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def dumps(m: Matrix) -> str:
    lines = [f"{m.rows} {m.cols}"]
    for row in m.iter_rows():
        lines.append(" ".join(repr(float(v)) for v in row))
    return "\n".join(lines) + "\n"


def _parse_dim(token: str, name: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise MatrixFormatError(f"header {name} is not an integer: {token!r}") from None
    if value < 0:
        raise MatrixFormatError(f"header {name} is negative: {value}")
    return value


def loads(text: str) -> Matrix:
    """
    Parse the text format. Raises MatrixFormatError on a missing/invalid
    header, a non-numeric value, or fewer than rows*cols values. Anything
    after the last expected value is ignored.
    """
    tokens: List[str] = text.split()
    if len(tokens) < 2:
        raise MatrixFormatError("missing 'rows cols' header")
    rows = _parse_dim(tokens[0], "rows")
    cols = _parse_dim(tokens[1], "cols")

    expected = rows * cols
    body = tokens[2:2 + expected]
    if len(body) < expected:
        raise MatrixFormatError(f"expected {expected} values for a {rows}x{cols} matrix, found {len(body)}")

    m = Matrix(rows, cols)
    for idx, tok in enumerate(body):
        try:
            m.data[idx] = float(tok)
        except ValueError:
            i, j = divmod(idx, cols)
            raise MatrixFormatError(f"value at ({i}, {j}) is not a number: {tok!r}") from None
    return m


def save_txt(m: Matrix, path: PathLike) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(dumps(m))
    LOG.info("saved %dx%d matrix to %s", m.rows, m.cols, path)


def load_txt(path: PathLike) -> Matrix:
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    m = loads(text)
    LOG.info("loaded %dx%d matrix from %s", m.rows, m.cols, path)
    return m
