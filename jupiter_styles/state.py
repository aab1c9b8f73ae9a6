"""Chainable builder for loading, empty, error and other state-display classes."""

from __future__ import annotations

import copy
from enum import Enum

from jupiter_styles.colors import Color, ColorProvider


class StateIntent(Enum):
    INFORMATIONAL = "informational"
    LOADING = "loading"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    EMPTY = "empty"


class StateProminence(Enum):
    SUBTLE = "subtle"
    STANDARD = "standard"
    PROMINENT = "prominent"


class StateSize(Enum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"


class StateAlignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class StateActionRequirement(Enum):
    NONE = "none"
    OPTIONAL = "optional"
    RECOMMENDED = "recommended"
    REQUIRED = "required"


class LoadingVariant(Enum):
    SPINNER = "spinner"
    DOTS = "dots"
    PULSE = "pulse"
    BARS = "bars"
    SKELETON = "skeleton"


_INTENT_NAMES = {
    "informational": StateIntent.INFORMATIONAL,
    "info": StateIntent.INFORMATIONAL,
    "loading": StateIntent.LOADING,
    "success": StateIntent.SUCCESS,
    "warning": StateIntent.WARNING,
    "warn": StateIntent.WARNING,
    "error": StateIntent.ERROR,
    "empty": StateIntent.EMPTY,
}
_PROMINENCE_NAMES = {p.value: p for p in StateProminence}
_SIZE_NAMES = {s.value: s for s in StateSize}
_ALIGNMENT_NAMES = {a.value: a for a in StateAlignment}
_LOADING_NAMES = {v.value: v for v in LoadingVariant}

_LAYOUT_CLASSES = {
    StateAlignment.LEFT: "flex flex-col items-start text-left",
    StateAlignment.CENTER: "flex flex-col items-center text-center",
    StateAlignment.RIGHT: "flex flex-col items-end text-right",
}
_SPACING_CLASSES = {
    StateSize.XS: "px-4 py-8",
    StateSize.SM: "px-6 py-12",
    StateSize.MD: "px-8 py-16",
    StateSize.LG: "px-12 py-20",
    StateSize.XL: "px-16 py-24",
}
_ICONS = {
    StateIntent.INFORMATIONAL: "info",
    StateIntent.LOADING: "loader",
    StateIntent.SUCCESS: "check-circle",
    StateIntent.WARNING: "alert-triangle",
    StateIntent.ERROR: "alert-circle",
    StateIntent.EMPTY: "inbox",
}
_ACTION_TEXT = {
    (StateIntent.ERROR, StateActionRequirement.RECOMMENDED): "Try Again",
    (StateIntent.EMPTY, StateActionRequirement.OPTIONAL): "Refresh",
    (StateIntent.EMPTY, StateActionRequirement.RECOMMENDED): "Add Item",
    (StateIntent.WARNING, StateActionRequirement.REQUIRED): "Take Action",
}
_CONTENT_SIZES = {
    StateSize.XS: "text-lg",
    StateSize.SM: "text-xl",
    StateSize.MD: "text-2xl",
    StateSize.LG: "text-3xl",
    StateSize.XL: "text-4xl",
}
_DESCRIPTION_SIZES = {
    StateSize.XS: "text-sm",
    StateSize.SM: "text-base",
    StateSize.MD: "text-lg",
    StateSize.LG: "text-xl",
    StateSize.XL: "text-2xl",
}
_ICON_SIZES = {
    StateSize.XS: "w-8 h-8",
    StateSize.SM: "w-12 h-12",
    StateSize.MD: "w-16 h-16",
    StateSize.LG: "w-20 h-20",
    StateSize.XL: "w-24 h-24",
}
_LOADING_SIZES = {
    LoadingVariant.SPINNER: {
        StateSize.XS: "w-6 h-6",
        StateSize.SM: "w-8 h-8",
        StateSize.MD: "w-12 h-12",
        StateSize.LG: "w-16 h-16",
        StateSize.XL: "w-20 h-20",
    },
    LoadingVariant.DOTS: {
        StateSize.XS: "w-2 h-2",
        StateSize.SM: "w-3 h-3",
        StateSize.MD: "w-4 h-4",
        StateSize.LG: "w-5 h-5",
        StateSize.XL: "w-6 h-6",
    },
}
_LOADING_CLASSES = {
    LoadingVariant.SPINNER: "animate-spin border-4 border-t-transparent rounded-full",
    LoadingVariant.DOTS: "animate-bounce rounded-full",
    LoadingVariant.PULSE: "animate-pulse rounded-full",
    LoadingVariant.BARS: "animate-pulse rounded-sm",
    LoadingVariant.SKELETON: "animate-pulse rounded",
}


class StateStyles:
    """Immutable, chainable builder of CSS classes for state displays.

    Every setter returns a new builder; the original is left unchanged.
    """

    def __init__(self, color_provider: ColorProvider) -> None:
        self.color_provider = color_provider
        self.intent = StateIntent.INFORMATIONAL
        self.prominence = StateProminence.STANDARD
        self.size = StateSize.MD
        self.alignment = StateAlignment.CENTER
        self.action_requirement = StateActionRequirement.NONE
        self.loading_variant: LoadingVariant | None = None
        self.is_fullscreen_layout = False
        self.extra_classes: tuple[str, ...] = ()

    def _with(self, **changes: object) -> StateStyles:
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, name, value)
        return clone

    # Intent

    def informational(self) -> StateStyles:
        return self._with(intent=StateIntent.INFORMATIONAL)

    def loading(self) -> StateStyles:
        return self._with(intent=StateIntent.LOADING)

    def success(self) -> StateStyles:
        return self._with(intent=StateIntent.SUCCESS)

    def warning(self) -> StateStyles:
        return self._with(intent=StateIntent.WARNING)

    def error(self) -> StateStyles:
        return self._with(intent=StateIntent.ERROR)

    def empty(self) -> StateStyles:
        return self._with(intent=StateIntent.EMPTY)

    # Prominence

    def subtle(self) -> StateStyles:
        return self._with(prominence=StateProminence.SUBTLE)

    def standard(self) -> StateStyles:
        return self._with(prominence=StateProminence.STANDARD)

    def prominent(self) -> StateStyles:
        return self._with(prominence=StateProminence.PROMINENT)

    # Size

    def xs(self) -> StateStyles:
        return self._with(size=StateSize.XS)

    def sm(self) -> StateStyles:
        return self._with(size=StateSize.SM)

    def md(self) -> StateStyles:
        return self._with(size=StateSize.MD)

    def lg(self) -> StateStyles:
        return self._with(size=StateSize.LG)

    def xl(self) -> StateStyles:
        return self._with(size=StateSize.XL)

    # Alignment

    def left_aligned(self) -> StateStyles:
        return self._with(alignment=StateAlignment.LEFT)

    def center_aligned(self) -> StateStyles:
        return self._with(alignment=StateAlignment.CENTER)

    def right_aligned(self) -> StateStyles:
        return self._with(alignment=StateAlignment.RIGHT)

    # Action requirement

    def no_action(self) -> StateStyles:
        return self._with(action_requirement=StateActionRequirement.NONE)

    def optional_action(self) -> StateStyles:
        return self._with(action_requirement=StateActionRequirement.OPTIONAL)

    def recommended_action(self) -> StateStyles:
        return self._with(action_requirement=StateActionRequirement.RECOMMENDED)

    def required_action(self) -> StateStyles:
        return self._with(action_requirement=StateActionRequirement.REQUIRED)

    # Loading variant

    def spinner(self) -> StateStyles:
        return self._with(loading_variant=LoadingVariant.SPINNER)

    def dots(self) -> StateStyles:
        return self._with(loading_variant=LoadingVariant.DOTS)

    def pulse(self) -> StateStyles:
        return self._with(loading_variant=LoadingVariant.PULSE)

    def bars(self) -> StateStyles:
        return self._with(loading_variant=LoadingVariant.BARS)

    def skeleton(self) -> StateStyles:
        return self._with(loading_variant=LoadingVariant.SKELETON)

    # Layout

    def fullscreen(self, fullscreen: bool) -> StateStyles:
        return self._with(is_fullscreen_layout=bool(fullscreen))

    def is_fullscreen(self) -> StateStyles:
        return self._with(is_fullscreen_layout=True)

    # Custom classes

    def custom(self, css_class: str) -> StateStyles:
        return self._with(extra_classes=(*self.extra_classes, css_class))

    def custom_classes(self, classes: str) -> StateStyles:
        return self._with(extra_classes=(*self.extra_classes, *classes.split()))

    # String setters; unknown names fall back to the defaults

    def intent_str(self, intent: str) -> StateStyles:
        return self._with(intent=_INTENT_NAMES.get(intent, StateIntent.INFORMATIONAL))

    def prominence_str(self, prominence: str) -> StateStyles:
        return self._with(
            prominence=_PROMINENCE_NAMES.get(prominence, StateProminence.STANDARD)
        )

    def size_str(self, size: str) -> StateStyles:
        return self._with(size=_SIZE_NAMES.get(size, StateSize.MD))

    def alignment_str(self, alignment: str) -> StateStyles:
        return self._with(alignment=_ALIGNMENT_NAMES.get(alignment, StateAlignment.CENTER))

    def loading_variant_str(self, variant: str) -> StateStyles:
        return self._with(loading_variant=_LOADING_NAMES.get(variant))

    # Output

    def classes(self) -> str:
        """The sorted, de-duplicated class string."""
        return self.build()

    def build(self) -> str:
        """The sorted, de-duplicated class string (same as ``classes``)."""
        parts = ["state-pattern", _LAYOUT_CLASSES[self.alignment]]
        if self.is_fullscreen_layout:
            parts.append("min-h-screen justify-center")
        parts.append(_SPACING_CLASSES[self.size])
        parts.append(self._intent_classes())
        if self.loading_variant is not None:
            parts.append(_LOADING_CLASSES[self.loading_variant])
        parts.extend(self.extra_classes)
        return " ".join(sorted(set(" ".join(parts).split())))

    def suggested_icon(self) -> str:
        return _ICONS[self.intent]

    def suggested_action_text(self) -> str | None:
        return _ACTION_TEXT.get((self.intent, self.action_requirement))

    def content_size_classes(self) -> str:
        return _CONTENT_SIZES[self.size]

    def description_size_classes(self) -> str:
        return _DESCRIPTION_SIZES[self.size]

    def icon_size_classes(self) -> str:
        return _ICON_SIZES[self.size]

    def loading_size_classes(self) -> str:
        sizes = _LOADING_SIZES.get(self.loading_variant)
        return sizes[self.size] if sizes else "w-8 h-8"

    def _intent_classes(self) -> str:
        cp = self.color_provider
        background = cp.bg_class(Color.BACKGROUND)
        if self.intent is StateIntent.INFORMATIONAL:
            return f"{cp.text_class(Color.TEXT_PRIMARY)} {background}"
        if self.intent is StateIntent.LOADING:
            return f"{cp.text_class(Color.PRIMARY)} {background}"
        if self.intent is StateIntent.SUCCESS:
            return "text-green-600 bg-green-50"
        if self.intent is StateIntent.WARNING:
            return "text-orange-600 bg-orange-50"
        if self.intent is StateIntent.ERROR:
            return "text-red-600 bg-red-50"
        return f"{cp.text_class(Color.TEXT_SECONDARY)} {background}"


def state_styles(color_provider: ColorProvider) -> StateStyles:
    return StateStyles(color_provider)


def loading_state_styles(color_provider: ColorProvider) -> StateStyles:
    return (
        StateStyles(color_provider)
        .loading()
        .standard()
        .center_aligned()
        .spinner()
        .no_action()
    )


def empty_state_styles(color_provider: ColorProvider) -> StateStyles:
    return StateStyles(color_provider).empty().standard().center_aligned().optional_action()


def error_state_styles(color_provider: ColorProvider) -> StateStyles:
    return (
        StateStyles(color_provider).error().prominent().center_aligned().recommended_action()
    )


def success_state_styles(color_provider: ColorProvider) -> StateStyles:
    return StateStyles(color_provider).success().standard().center_aligned().no_action()


def state_classes_from_strings(
    color_provider: ColorProvider,
    intent: str,
    prominence: str,
    size: str,
    alignment: str,
    loading_variant: str | None,
    fullscreen: bool,
) -> str:
    """Build state classes in one call from string options."""
    builder = (
        StateStyles(color_provider)
        .intent_str(intent)
        .prominence_str(prominence)
        .size_str(size)
        .alignment_str(alignment)
        .fullscreen(fullscreen)
    )
    if loading_variant is not None:
        builder = builder.loading_variant_str(loading_variant)
    return builder.classes()