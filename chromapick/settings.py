"""
Rendering and layout constants.

Every selector takes its style as an optional constructor argument; the
module-level defaults below are used otherwise.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from .colors.color import WHITE, Color


@dataclass(frozen=True)
class CircleStyle:
    """Layout of the hue ring and the SV triangle."""
    margin: int = 8
    outer_ratio: int = 7
    inner_ratio: int = 5
    aa_width: int = 1
    line_width: float = 1.0


@dataclass(frozen=True)
class RectStyle:
    """Layout of the hue x SV rectangle."""
    cursor_size: int = 14


@dataclass(frozen=True)
class RenderSettings:
    """
    Shared rendering options.

    Attributes:
        base_color: Background behind the ring and triangle
        start_hue: Initial hue in degrees
        start_saturation: Initial saturation
        start_value: Initial value
        parallel: Split the triangle pass over a thread pool
        max_workers: Pool size; ``None`` picks one from the CPU count
        min_parallel_rows: Smaller triangles are rendered on the caller thread
    """
    base_color: Color = field(default=WHITE)
    start_hue: float = 0.0
    start_saturation: float = 1.0
    start_value: float = 1.0
    parallel: bool = True
    max_workers: Optional[int] = None
    min_parallel_rows: int = 64

    def worker_count(self, rows: int) -> int:
        if not self.parallel or rows < self.min_parallel_rows:
            return 1
        workers = self.max_workers or min(8, os.cpu_count() or 1)
        return max(1, min(workers, rows))


DEFAULT_CIRCLE_STYLE = CircleStyle()
DEFAULT_RECT_STYLE = RectStyle()
DEFAULT_RENDER_SETTINGS = RenderSettings()
