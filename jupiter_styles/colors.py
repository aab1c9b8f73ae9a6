"""Semantic colour tokens and the provider that turns them into utility classes."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType


class Color(Enum):
    """Semantic colour roles used by the style builders."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"
    SURFACE = "surface"
    BACKGROUND = "background"
    FOREGROUND = "foreground"
    BORDER = "border"
    TEXT_PRIMARY = "text-primary"
    TEXT_SECONDARY = "text-secondary"
    TEXT_TERTIARY = "text-tertiary"
    TEXT_INVERSE = "text-inverse"
    INTERACTIVE = "interactive"
    INTERACTIVE_HOVER = "interactive-hover"
    INTERACTIVE_ACTIVE = "interactive-active"
    INTERACTIVE_DISABLED = "interactive-disabled"


_DEFAULT_PALETTE: Mapping[Color, str] = MappingProxyType(
    {
        Color.PRIMARY: "jupiter-blue-500",
        Color.SECONDARY: "jupiter-green-500",
        Color.ACCENT: "jupiter-orange-500",
        Color.SUCCESS: "green-500",
        Color.WARNING: "amber-500",
        Color.ERROR: "red-500",
        Color.INFO: "blue-500",
        Color.SURFACE: "white",
        Color.BACKGROUND: "gray-50",
        Color.FOREGROUND: "gray-900",
        Color.BORDER: "gray-200",
        Color.TEXT_PRIMARY: "gray-900",
        Color.TEXT_SECONDARY: "gray-600",
        Color.TEXT_TERTIARY: "gray-400",
        Color.TEXT_INVERSE: "white",
        Color.INTERACTIVE: "jupiter-blue-500",
        Color.INTERACTIVE_HOVER: "jupiter-blue-600",
        Color.INTERACTIVE_ACTIVE: "jupiter-blue-700",
        Color.INTERACTIVE_DISABLED: "gray-300",
    }
)


class ColorProvider:
    """Maps semantic colours to Tailwind colour tokens.

    The default palette can be partly or wholly replaced by passing a mapping
    of ``Color`` to token, e.g. ``{Color.PRIMARY: "indigo-600"}``.
    """

    __slots__ = ("_palette",)

    def __init__(self, palette: Mapping[Color, str] | None = None) -> None:
        merged = dict(_DEFAULT_PALETTE)
        if palette:
            merged.update(palette)
        self._palette: Mapping[Color, str] = MappingProxyType(merged)

    @property
    def palette(self) -> Mapping[Color, str]:
        """The read-only colour-to-token mapping in use."""
        return self._palette

    def token(self, color: Color) -> str:
        """Return the colour token for a semantic colour."""
        try:
            return self._palette[color]
        except KeyError:
            raise ValueError(f"no colour token for {color!r}") from None

    def bg_class(self, color: Color) -> str:
        """Background utility class for a semantic colour."""
        return f"bg-{self.token(color)}"

    def text_class(self, color: Color) -> str:
        """Text utility class for a semantic colour."""
        return f"text-{self.token(color)}"

    def border_class(self, color: Color) -> str:
        """Border utility class for a semantic colour."""
        return f"border-{self.token(color)}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorProvider):
            return NotImplemented
        return dict(self._palette) == dict(other._palette)

    def __hash__(self) -> int:
        return hash(frozenset(self._palette.items()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"