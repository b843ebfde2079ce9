# utils/format.py
"""Formatting helpers for NumPy outputs."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt


def format_matrix(matrix: npt.NDArray[np.integer], cell_width: int = 3) -> str:
    """Format an adjacency matrix with 1-based row and column headers.

    Args:
        matrix: Square 0/1 matrix
        cell_width: Width of every column, header included

    Returns:
        Multi-line string, one line per vertex plus a header line
    """
    n = matrix.shape[0]
    header = " " * cell_width + "".join(f"{j + 1:>{cell_width}}" for j in range(n))
    rows = [header]
    for i in range(n):
        cells = "".join(f"{int(value):>{cell_width}}" for value in matrix[i])
        rows.append(f"{i + 1:>{cell_width}}{cells}")
    return "\n".join(rows)


__all__ = ["format_matrix"]
