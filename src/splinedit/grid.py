"""Fixed-size rectangular grids for surface control points and weights."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterator, List, Sequence, Tuple


@dataclass(frozen=True)
class Grid:
    """Row-major grid with explicit dimensions.

    ``values`` holds ``rows * cols`` entries; entry ``(r, c)`` lives at
    ``r * cols + c``.  Rows index the surface ``u`` direction and
    columns the ``v`` direction.
    """

    rows: int
    cols: int
    values: Tuple[Any, ...]

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError("grid dimensions must be non-negative")
        if len(self.values) != self.rows * self.cols:
            raise ValueError(
                f"grid of {self.rows}x{self.cols} needs {self.rows * self.cols} values, "
                f"got {len(self.values)}"
            )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> "Grid":
        """Build a grid from nested rows, rejecting ragged input."""

        rows = list(rows)
        if not rows:
            return cls(0, 0, ())
        cols = len(rows[0])
        flat: List[Any] = []
        for r, row in enumerate(rows):
            if len(row) != cols:
                raise ValueError(f"row {r} has {len(row)} entries, expected {cols}")
            flat.extend(_freeze(v) for v in row)
        return cls(len(rows), cols, tuple(flat))

    @classmethod
    def filled(cls, rows: int, cols: int, value: Any) -> "Grid":
        """Return a grid with every entry set to ``value``."""

        return cls(rows, cols, tuple(_freeze(value) for _ in range(rows * cols)))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def is_empty(self) -> bool:
        return self.rows == 0 or self.cols == 0

    def __getitem__(self, index: Tuple[int, int]) -> Any:
        r, c = index
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise IndexError(f"grid index {index} out of range for shape {self.shape}")
        return self.values[r * self.cols + c]

    def row(self, r: int) -> Tuple[Any, ...]:
        start = r * self.cols
        return self.values[start:start + self.cols]

    def column(self, c: int) -> Tuple[Any, ...]:
        return self.values[c::self.cols] if self.cols else ()

    def iter_rows(self) -> Iterator[Tuple[Any, ...]]:
        for r in range(self.rows):
            yield self.row(r)

    def to_rows(self) -> List[List[Any]]:
        return [list(row) for row in self.iter_rows()]


def _freeze(value: Any) -> Any:
    if isinstance(value, Real):
        return float(value)
    return tuple(float(v) for v in value)


def as_grid(obj: Any) -> Grid:
    """Coerce nested rows into a :class:`Grid`; grids pass through."""

    if isinstance(obj, Grid):
        return obj
    return Grid.from_rows(obj)


__all__ = ["Grid", "as_grid"]
