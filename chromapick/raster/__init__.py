from .dda import PointCallback, circle, dda, ellipse, filled_circle_points
from .occupancy import OccupancyMatrix

__all__ = [
    "PointCallback",
    "circle",
    "dda",
    "ellipse",
    "filled_circle_points",
    "OccupancyMatrix",
]
