# Copyright (c) 2026 Tinycolors
# SPDX-License-Identifier: MIT

"""
Color records — one immutable type per color space.

Design principles:
- Immutable: All types are frozen dataclasses
- Flat: Three float components, no alpha, no metadata
- Permissive: Out-of-range components are accepted as-is; conversions
  produce mathematically defined (possibly out-of-range) results
- Interchangeable: Every record converts to every other record

Color spaces:
- srgb:  r, g, b — gamma-encoded sRGB
- rgb:   r, g, b — linear-light sRGB
- oklab: l, a, b — perceptual lightness and opponent axes
- okhsl: h, s, l — OKLab-based HSL, saturation relative to the sRGB gamut
- okhsv: h, s, v — OKLab-based HSV, saturation relative to the sRGB gamut
- hsl:   h, s, l — classic HSL on sRGB
- hsv:   h, s, v — classic HSV on sRGB

Hues are fractions of a full turn in [0, 1).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray


# =============================================================================
# Color Spaces
# =============================================================================


class ColorSpace(Enum):
    """The seven supported color representations."""
    SRGB = "srgb"
    RGB = "rgb"
    OKLAB = "oklab"
    OKHSL = "okhsl"
    OKHSV = "okhsv"
    HSL = "hsl"
    HSV = "hsv"

    @property
    def components(self) -> tuple[str, str, str]:
        """Component names in storage order."""
        return _COMPONENTS[self]

    @classmethod
    def coerce(cls, value: Union[ColorSpace, str]) -> ColorSpace:
        """Accept a ColorSpace or its name ("okhsl", "OKHSL")."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            names = ", ".join(space.value for space in cls)
            raise ValueError(
                f"Unknown color space {value!r}; expected one of: {names}"
            ) from None


_COMPONENTS = {
    ColorSpace.SRGB: ("r", "g", "b"),
    ColorSpace.RGB: ("r", "g", "b"),
    ColorSpace.OKLAB: ("l", "a", "b"),
    ColorSpace.OKHSL: ("h", "s", "l"),
    ColorSpace.OKHSV: ("h", "s", "v"),
    ColorSpace.HSL: ("h", "s", "l"),
    ColorSpace.HSV: ("h", "s", "v"),
}


# =============================================================================
# Shared Behavior
# =============================================================================


class Color:
    """
    Behavior shared by every color record.

    Generic code can accept any ``Color`` and ask for the representation it
    needs (``color.to_okhsl()``, ``color.to("rgb")``) without knowing which
    space the caller stored it in.
    """
    __slots__ = ()

    space: ClassVar[ColorSpace]

    # -- marshaling -----------------------------------------------------------

    def to_tuple(self) -> tuple[float, float, float]:
        """Components in storage order."""
        return tuple(getattr(self, name) for name in self.space.components)

    def to_array(self, dtype=np.float64) -> NDArray:
        """Components as a (3,) array."""
        return np.array(self.to_tuple(), dtype=dtype)

    @classmethod
    def from_array(cls, values: ArrayLike) -> Color:
        """Build from a sequence or array of three components."""
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(
                f"Expected 3 components, got shape {arr.shape}"
            )
        return cls(*(float(x) for x in arr))

    def to_dict(self) -> dict:
        """Serialize to dictionary (flat three-field record)."""
        return dict(zip(self.space.components, self.to_tuple()))

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary."""
        return cls(*(float(data[name]) for name in cls.space.components))

    # -- conversion -----------------------------------------------------------

    def to(self, target: Union[ColorSpace, str, type]) -> Color:
        """
        Convert to another representation.

        Args:
            target: ColorSpace, space name ("okhsl"), or record class
                (OKHSLColor)

        Returns:
            Record of the target space
        """
        if isinstance(target, type):
            if not issubclass(target, Color):
                raise TypeError(
                    f"Expected a Color subclass, got {target.__name__}"
                )
            target = target.space
        target = ColorSpace.coerce(target)
        if target is self.space:
            return self

        from tinycolors.convert.route import convert
        values = convert(self.to_array(), self.space, target)
        return COLOR_TYPES[target].from_array(values)

    @classmethod
    def from_color(cls, color: Color) -> Color:
        """Convert any color record into this class."""
        return color.to(cls.space)

    def to_srgb(self) -> SRGBColor:
        return self.to(ColorSpace.SRGB)

    def to_rgb(self) -> LinearRGBColor:
        return self.to(ColorSpace.RGB)

    def to_oklab(self) -> OKLabColor:
        return self.to(ColorSpace.OKLAB)

    def to_okhsl(self) -> OKHSLColor:
        return self.to(ColorSpace.OKHSL)

    def to_okhsv(self) -> OKHSVColor:
        return self.to(ColorSpace.OKHSV)

    def to_hsl(self) -> HSLColor:
        return self.to(ColorSpace.HSL)

    def to_hsv(self) -> HSVColor:
        return self.to(ColorSpace.HSV)

    # -- comparison -----------------------------------------------------------

    def isclose(self, other: Color, *, atol: float = 1e-4) -> bool:
        """
        Component-wise comparison within ``atol``.

        ``other`` is converted into this record's space first. Hue is
        compared as-is (0.0 and 0.99999 are not close).
        """
        other = other.to(self.space)
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=0.0, atol=atol))


# =============================================================================
# Color Records
# =============================================================================


@dataclass(frozen=True, slots=True)
class SRGBColor(Color):
    """
    Gamma-encoded sRGB.

    Attributes:
        r, g, b: Typically 0-1; extended values describe out-of-gamut colors
    """
    space: ClassVar[ColorSpace] = ColorSpace.SRGB

    WHITE: ClassVar[SRGBColor]
    BLACK: ClassVar[SRGBColor]
    RED: ClassVar[SRGBColor]
    YELLOW: ClassVar[SRGBColor]
    GREEN: ClassVar[SRGBColor]
    AQUA: ClassVar[SRGBColor]
    BLUE: ClassVar[SRGBColor]
    PURPLE: ClassVar[SRGBColor]

    r: float
    g: float
    b: float


@dataclass(frozen=True, slots=True)
class LinearRGBColor(Color):
    """
    Linear-light sRGB.

    Attributes:
        r, g, b: 0 = no light, 1 = full intensity of the channel
    """
    space: ClassVar[ColorSpace] = ColorSpace.RGB

    r: float
    g: float
    b: float


@dataclass(frozen=True, slots=True)
class OKLabColor(Color):
    """
    OKLab.

    Attributes:
        l: Lightness (0.0 = black, 1.0 = white)
        a: Green (-) to red (+) axis
        b: Blue (-) to yellow (+) axis
    """
    space: ClassVar[ColorSpace] = ColorSpace.OKLAB

    l: float
    a: float
    b: float

    @property
    def chroma(self) -> float:
        """Distance from the neutral axis."""
        return float(np.hypot(self.a, self.b))


@dataclass(frozen=True, slots=True)
class OKHSLColor(Color):
    """
    Okhsl.

    Attributes:
        h: Hue, fraction of a full turn
        s: Saturation; 1.0 is the sRGB gamut boundary at this lightness
        l: Toe-remapped perceptual lightness
    """
    space: ClassVar[ColorSpace] = ColorSpace.OKHSL

    h: float
    s: float
    l: float


@dataclass(frozen=True, slots=True)
class OKHSVColor(Color):
    """
    Okhsv.

    Attributes:
        h: Hue, fraction of a full turn
        s: Saturation relative to the gamut cusp
        v: Value; 1.0 lies on the sRGB gamut boundary
    """
    space: ClassVar[ColorSpace] = ColorSpace.OKHSV

    h: float
    s: float
    v: float


@dataclass(frozen=True, slots=True)
class HSLColor(Color):
    """Classic HSL over gamma-encoded sRGB."""
    space: ClassVar[ColorSpace] = ColorSpace.HSL

    h: float
    s: float
    l: float


@dataclass(frozen=True, slots=True)
class HSVColor(Color):
    """Classic HSV over gamma-encoded sRGB."""
    space: ClassVar[ColorSpace] = ColorSpace.HSV

    h: float
    s: float
    v: float


COLOR_TYPES: dict[ColorSpace, type[Color]] = {
    ColorSpace.SRGB: SRGBColor,
    ColorSpace.RGB: LinearRGBColor,
    ColorSpace.OKLAB: OKLabColor,
    ColorSpace.OKHSL: OKHSLColor,
    ColorSpace.OKHSV: OKHSVColor,
    ColorSpace.HSL: HSLColor,
    ColorSpace.HSV: HSVColor,
}


# =============================================================================
# Named Colors
# =============================================================================

NAMED_COLORS: dict[str, SRGBColor] = {
    "white": SRGBColor(1.0, 1.0, 1.0),
    "black": SRGBColor(0.0, 0.0, 0.0),
    "red": SRGBColor(1.0, 0.0, 0.0),
    "yellow": SRGBColor(1.0, 1.0, 0.0),
    "green": SRGBColor(0.0, 1.0, 0.0),
    "aqua": SRGBColor(0.0, 1.0, 1.0),
    "blue": SRGBColor(0.0, 0.0, 1.0),
    "purple": SRGBColor(1.0, 0.0, 1.0),
}

for _name, _color in NAMED_COLORS.items():
    setattr(SRGBColor, _name.upper(), _color)
del _name, _color


def named_color(name: str) -> SRGBColor:
    """Look up a named color ("red", "Aqua")."""
    try:
        return NAMED_COLORS[name.lower()]
    except KeyError:
        raise KeyError(f"No named color '{name}'") from None
