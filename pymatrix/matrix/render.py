"""
Aligned text rendering for matrices.

Two phases: every cell is converted to text first, then each column is
padded to its widest cell. The element type never matters past the first
phase.
"""

from __future__ import annotations

from typing import Any, Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from pymatrix.matrix.dense import Matrix


def column_widths(cells: Matrix[str]) -> list[int]:
    """Widest rendered cell in each column of an already-stringified matrix."""
    return [max((len(s) for s in col), default=0) for col in cells.cols()]


def render(matrix: Matrix, formatter: Callable[[Any], str] = str) -> str:
    """
    Render matrix as one '[a b c]' line per row, cells right-aligned.

    Args:
        matrix: Matrix to render
        formatter: Element-to-text conversion (str, repr, or a format
            function such as '{:.3f}'.format)

    Returns:
        Rows joined with newlines; empty string for an empty matrix
    """
    cells = matrix.map(formatter)
    widths = column_widths(cells)
    return "\n".join(
        "[" + " ".join(s.rjust(w) for s, w in zip(row, widths)) + "]"
        for row in cells.rows()
    )


__all__ = ['render', 'column_widths']
