"""
Dense row-major matrix.

Storage is one flat list: the element at row y, column x lives at index
y * width + x. Height is derived from the list length and never stored.

Construction and access need nothing from the element type. Algebra
(+, @, identity) and the row helpers used by the solver go through a Ring.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionError
from pymatrix.matrix.render import render

if TYPE_CHECKING:
    from pymatrix.core.protocols import Ring

A = TypeVar('A')
B = TypeVar('B')


class RowView(Sequence):
    """
    Mutable view of one matrix row.

    Writes go straight into the owning matrix. Slicing returns a list copy.
    """

    __slots__ = ('_data', '_start', '_width')

    def __init__(self, data: list, start: int, width: int):
        self._data = data
        self._start = start
        self._width = width

    def __len__(self) -> int:
        return self._width

    def _index(self, i: int) -> int:
        if i < 0:
            i += self._width
        if not 0 <= i < self._width:
            raise IndexError(f"row index {i} out of range for width {self._width}")
        return self._start + i

    def __getitem__(self, i):
        if isinstance(i, slice):
            return self._data[self._start:self._start + self._width][i]
        return self._data[self._index(i)]

    def __setitem__(self, i: int, value) -> None:
        self._data[self._index(i)] = value

    def __iter__(self) -> Iterator:
        return iter(self._data[self._start:self._start + self._width])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence) or isinstance(other, str):
            return NotImplemented
        return len(other) == self._width and all(a == b for a, b in zip(self, other))

    __hash__ = None

    def __repr__(self) -> str:
        return f"RowView({list(self)!r})"


class _Rows:
    """Restartable iterable over a matrix's rows."""

    __slots__ = ('_matrix',)

    def __init__(self, matrix: Matrix):
        self._matrix = matrix

    def __iter__(self) -> Iterator[RowView]:
        m = self._matrix
        for y in range(m.height):
            yield RowView(m._data, y * m.width, m.width)

    def __len__(self) -> int:
        return self._matrix.height


class Matrix(Generic[A]):
    """
    Dense matrix over an arbitrary element type.

    Build with Matrix.filled(), Matrix.by_pos(), Matrix.from_rows(),
    Matrix.column() or Matrix.from_array(). Matrices are mutable (set(),
    row views, solver) and therefore unhashable.

    Example:
        >>> m = Matrix.by_pos(2, 3, lambda y, x: y * 3 + x)
        >>> m.get(1, 2)
        5
        >>> m.get(2, 0) is None
        True
        >>> print(m.transpose())
        [0 3]
        [1 4]
        [2 5]
    """

    __slots__ = ('_width', '_data')

    def __init__(self, width: int, data: list[A]):
        if width < 0:
            raise ValueError(f"width must be non-negative, got {width}")
        if width == 0 and data:
            raise DimensionError(f"zero-width matrix cannot hold {len(data)} elements")
        if width and len(data) % width:
            raise DimensionError(
                f"data length {len(data)} is not a multiple of width {width}"
            )
        self._width = width
        self._data = data

    # === Builders ===

    @classmethod
    def filled(cls, height: int, width: int, value: A) -> Matrix[A]:
        """Matrix with every cell equal to value."""
        return cls(width, [value] * (height * width))

    @classmethod
    def by_pos(cls, height: int, width: int, f: Callable[[int, int], A]) -> Matrix[A]:
        """Matrix whose cell (y, x) is f(y, x), evaluated row-major."""
        return cls(width, [f(y, x) for y in range(height) for x in range(width)])

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[A]]) -> Matrix[A]:
        """
        Matrix from nested rows.

        Raises:
            DimensionError: If rows have different lengths
        """
        rows = [list(r) for r in rows]
        if not rows:
            return cls(0, [])
        width = len(rows[0])
        for i, r in enumerate(rows):
            if len(r) != width:
                raise DimensionError(
                    f"from_rows: row {i} has {len(r)} elements, expected {width}",
                    expected=(width,),
                    actual=(len(r),),
                )
        return cls(width, [e for r in rows for e in r])

    @classmethod
    def column(cls, values: Iterable[A]) -> Matrix[A]:
        """n x 1 column vector."""
        data = list(values)
        return cls(1 if data else 0, data)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Matrix from a 2D NumPy array (1D arrays become columns).

        Elements keep the array's scalar type (np.float64, np.float32, ...).
        """
        arr = np.asarray(array)
        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        if arr.ndim != 2:
            raise DimensionError(
                f"from_array: expected 1D or 2D array, got {arr.ndim}D with shape {arr.shape}",
                actual=arr.shape,
            )
        if arr.size == 0:
            return cls(0, [])
        return cls(arr.shape[1], list(arr.ravel()))

    @classmethod
    def identity(cls, size: int, ring: Ring | None = None) -> Matrix:
        """size x size identity over ring (float64 by default)."""
        from pymatrix.matrix.algebra import identity
        return identity(size, ring)

    # === Shape ===

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        if self._width == 0:
            return 0
        return len(self._data) // self._width

    @property
    def shape(self) -> tuple[int, int]:
        return (self.height, self._width)

    @property
    def data(self) -> tuple[A, ...]:
        """Read-only snapshot of the row-major backing store."""
        return tuple(self._data)

    # === Access ===

    def _offset(self, y: int, x: int) -> int | None:
        if y < 0 or x < 0 or y >= self.height or x >= self._width:
            return None
        return y * self._width + x

    def get(self, y: int, x: int) -> A | None:
        """Element at (y, x), or None when out of bounds."""
        i = self._offset(y, x)
        return None if i is None else self._data[i]

    def set(self, y: int, x: int, value: A) -> bool:
        """Write (y, x). Returns False, writing nothing, when out of bounds."""
        i = self._offset(y, x)
        if i is None:
            return False
        self._data[i] = value
        return True

    def update(self, y: int, x: int, f: Callable[[A], A]) -> A | None:
        """Replace (y, x) with f(old) in place; None when out of bounds."""
        i = self._offset(y, x)
        if i is None:
            return None
        self._data[i] = f(self._data[i])
        return self._data[i]

    def row(self, n: int) -> RowView:
        """
        Mutable view of row n.

        Raises:
            IndexError: If n is not a valid row index
        """
        if n < 0 or n >= self.height:
            raise IndexError(f"row {n} out of range for height {self.height}")
        return RowView(self._data, n * self._width, self._width)

    def rows(self) -> _Rows:
        """Lazy, restartable iterable of row views."""
        return _Rows(self)

    def cols(self) -> list[list[A]]:
        """Columns as lists. Copies every element (goes through transpose)."""
        return [list(r) for r in self.transpose().rows()]

    # === Structural transforms ===

    def transpose(self) -> Matrix[A]:
        """
        New matrix with t.get(x, y) == self.get(y, x).

        transpose() is an involution except on empty matrices: width 0 always
        means height 0, so transposing a 0 x k matrix gives 0 x 0 and a second
        transpose cannot restore 0 x k.
        """
        return Matrix.by_pos(self._width, self.height, lambda y, x: self._data[x * self._width + y])

    @property
    def T(self) -> Matrix[A]:
        return self.transpose()

    def map(self, f: Callable[[A], B]) -> Matrix[B]:
        return Matrix(self._width, [f(e) for e in self._data])

    def copy(self) -> Matrix[A]:
        return Matrix(self._width, list(self._data))

    def to_array(self, dtype: Any = np.float64) -> NDArray:
        """Convert to a (height, width) NumPy array of dtype."""
        arr = np.fromiter((float(e) for e in self._data), dtype=dtype, count=len(self._data))
        return arr.reshape(self.height, self._width)

    def to_list(self) -> list[list[A]]:
        return [list(r) for r in self.rows()]

    # === Row operations (used by the solver) ===

    def swap_rows(self, i: int, j: int) -> None:
        if i == j:
            return
        a, b = self.row(i)[:], self.row(j)[:]
        w = self._width
        self._data[i * w:(i + 1) * w] = b
        self._data[j * w:(j + 1) * w] = a

    def scale_row(self, y: int, factor: A, ring: Ring) -> None:
        """Multiply every element of row y by factor, in place."""
        row = self.row(y)
        for x in range(self._width):
            row[x] = ring.mul(row[x], factor)

    def add_scaled_row(self, src: int, dest: int, factor: A, ring: Ring) -> None:
        """
        Row dest += factor * row src, in place.

        Raises:
            ValueError: If src == dest
        """
        if src == dest:
            raise ValueError(f"add_scaled_row: source and destination are both row {src}")
        s, d = self.row(src), self.row(dest)
        for x in range(self._width):
            d[x] = ring.add(d[x], ring.mul(s[x], factor))

    # === Algebra ===

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.matrix.algebra import add
        return add(self, other)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.matrix.algebra import matmul
        return matmul(self, other)

    # === Comparison / display ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._width != other._width or self.height != other.height:
            return False
        return all(a == b for a, b in zip(self._data, other._data))

    __hash__ = None

    def __str__(self) -> str:
        return render(self, str)

    def __repr__(self) -> str:
        h, w = self.shape
        body = render(self, repr)
        return f"Matrix({h}x{w})" + (f"\n{body}" if body else "")


__all__ = [
    'Matrix',
    'RowView',
]
