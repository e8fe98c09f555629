from .base import ChangeHandler, ColorSelector, HitRegion
from .circle import CircleSelector
from .cursor import SelectorCursor
from .geometry import CircleGeometry
from .rect import RectSelector

__all__ = [
    "ChangeHandler",
    "ColorSelector",
    "HitRegion",
    "CircleSelector",
    "CircleGeometry",
    "RectSelector",
    "SelectorCursor",
]
