from __future__ import annotations
from typing import Iterator, Tuple

from ..utils.num_utils import clamp_channel


class Color:
    """
    Immutable ARGB color with 8-bit channels.

    Channels are clamped into [0, 255] on construction. Alpha defaults to
    fully opaque. Equality and hashing are by value.
    """
    __slots__ = ('_value', '_is_frozen')  # no __dict__ → immutability

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: int, g: int, b: int, a: int = 255) -> None:
        self._value = (
            clamp_channel(a),
            clamp_channel(r),
            clamp_channel(g),
            clamp_channel(b),
        )
        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_argb(cls, argb: int) -> Color:
        """Unpack a 32-bit ``0xAARRGGBB`` integer."""
        return cls(
            (argb >> 16) & 0xFF,
            (argb >> 8) & 0xFF,
            argb & 0xFF,
            (argb >> 24) & 0xFF,
        )

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#RRGGBB`` or ``#AARRGGBB``."""
        digits = text.lstrip('#')
        if len(digits) == 6:
            return cls.from_argb(0xFF000000 | int(digits, 16))
        if len(digits) == 8:
            return cls.from_argb(int(digits, 16))
        raise ValueError(f"Expected #RRGGBB or #AARRGGBB, got {text!r}")

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def a(self) -> int:
        return self._value[0]

    @property
    def r(self) -> int:
        return self._value[1]

    @property
    def g(self) -> int:
        return self._value[2]

    @property
    def b(self) -> int:
        return self._value[3]

    @property
    def argb(self) -> Tuple[int, int, int, int]:
        return self._value

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self._value[1:]

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return self._value[1:] + self._value[:1]

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_argb(self) -> int:
        a, r, g, b = self._value
        return (a << 24) | (r << 16) | (g << 8) | b

    # ------------------ DERIVED COLORS ------------------
    def with_alpha(self, alpha: int) -> Color:
        return Color(self.r, self.g, self.b, alpha)

    def inverted(self) -> Color:
        """RGB channels xor 0xFF, alpha kept."""
        return Color(self.r ^ 0xFF, self.g ^ 0xFF, self.b ^ 0xFF, self.a)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[int]:
        return iter(self.rgb)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        a, r, g, b = self._value
        if a == 255:
            return f"Color({r}, {g}, {b})"
        return f"Color({r}, {g}, {b}, a={a})"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
