from .color import BLACK, WHITE, Color

__all__ = ["BLACK", "WHITE", "Color"]
