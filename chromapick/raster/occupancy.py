import numpy as np


class OccupancyMatrix:
    """
    Square boolean grid indexed by offset from a center point.

    Lives for a single circle or filled-disc call and guarantees each integer
    point is reported at most once across the symmetric octants.
    """

    __slots__ = ("_cells", "_origin")

    def __init__(self, diameter: int) -> None:
        size = max(diameter, 0) + 1
        self._cells = np.zeros((size, size), dtype=bool)
        self._origin = diameter >> 1

    def mark(self, dx: int, dy: int) -> bool:
        """Mark the offset; True when it was not marked before."""
        ix = dx + self._origin
        iy = dy + self._origin
        if self._cells[ix, iy]:
            return False
        self._cells[ix, iy] = True
        return True
