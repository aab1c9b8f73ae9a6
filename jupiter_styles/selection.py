"""Chainable builder for selection groups: filters, chips, tabs and the like."""

from __future__ import annotations

import copy
from enum import Enum

from jupiter_styles.colors import Color, ColorProvider


class SelectionBehavior(Enum):
    NONE = "none"
    SINGLE = "single"
    MULTIPLE = "multiple"
    TOGGLE = "toggle"


class SelectionState(Enum):
    UNSELECTED = "unselected"
    SELECTED = "selected"
    PARTIALLY_SELECTED = "partial"
    DISABLED = "disabled"


class SelectionDisplay(Enum):
    BUTTON = "button"
    CHIP = "chip"
    LIST_ITEM = "list-item"
    CARD = "card"
    TAB = "tab"


class SelectionLayout(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    GRID = "grid"
    DROPDOWN = "dropdown"
    INLINE = "inline"


class SelectionSize(Enum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"


class SelectionInteraction(Enum):
    SUBTLE = "subtle"
    STANDARD = "standard"
    PROMINENT = "prominent"


_BEHAVIOR_NAMES = {b.value: b for b in SelectionBehavior}
_STATE_NAMES = {
    "unselected": SelectionState.UNSELECTED,
    "inactive": SelectionState.UNSELECTED,
    "selected": SelectionState.SELECTED,
    "active": SelectionState.SELECTED,
    "partial": SelectionState.PARTIALLY_SELECTED,
    "disabled": SelectionState.DISABLED,
}
_DISPLAY_NAMES = {
    "button": SelectionDisplay.BUTTON,
    "chip": SelectionDisplay.CHIP,
    "list": SelectionDisplay.LIST_ITEM,
    "list-item": SelectionDisplay.LIST_ITEM,
    "card": SelectionDisplay.CARD,
    "tab": SelectionDisplay.TAB,
}
_LAYOUT_NAMES = {layout.value: layout for layout in SelectionLayout}
_SIZE_NAMES = {s.value: s for s in SelectionSize}
_INTERACTION_NAMES = {i.value: i for i in SelectionInteraction}

_LAYOUT_CLASSES = {
    SelectionLayout.HORIZONTAL: "flex flex-row gap-2 items-center",
    SelectionLayout.VERTICAL: "flex flex-col gap-2",
    SelectionLayout.GRID: "grid grid-cols-auto gap-2",
    SelectionLayout.DROPDOWN: "relative",
    SelectionLayout.INLINE: "flex flex-wrap gap-2 items-center",
}
_SPACING_CLASSES = {
    SelectionSize.XS: "gap-1",
    SelectionSize.SM: "gap-1.5",
    SelectionSize.MD: "gap-2",
    SelectionSize.LG: "gap-3",
    SelectionSize.XL: "gap-4",
}
_DISPLAY_CLASSES = {
    SelectionDisplay.BUTTON: (
        "inline-flex items-center justify-center font-medium rounded-md "
        "transition-all duration-200"
    ),
    SelectionDisplay.CHIP: "inline-flex items-center rounded-full transition-all duration-200",
    SelectionDisplay.LIST_ITEM: (
        "flex items-center w-full px-3 py-2 transition-all duration-200"
    ),
    SelectionDisplay.CARD: (
        "flex flex-col items-center p-4 rounded-lg border transition-all duration-200"
    ),
    SelectionDisplay.TAB: "flex items-center px-4 py-2 border-b-2 transition-all duration-200",
}
_ITEM_SIZE_CLASSES = {
    (SelectionDisplay.BUTTON, SelectionSize.XS): "px-2 py-1 text-xs",
    (SelectionDisplay.BUTTON, SelectionSize.SM): "px-3 py-1.5 text-sm",
    (SelectionDisplay.BUTTON, SelectionSize.MD): "px-4 py-2 text-base",
    (SelectionDisplay.BUTTON, SelectionSize.LG): "px-6 py-3 text-lg",
    (SelectionDisplay.BUTTON, SelectionSize.XL): "px-8 py-4 text-xl",
    (SelectionDisplay.CHIP, SelectionSize.XS): "px-2 py-0.5 text-xs",
    (SelectionDisplay.CHIP, SelectionSize.SM): "px-3 py-1 text-sm",
    (SelectionDisplay.CHIP, SelectionSize.MD): "px-3 py-1.5 text-base",
    (SelectionDisplay.CHIP, SelectionSize.LG): "px-4 py-2 text-lg",
    (SelectionDisplay.CHIP, SelectionSize.XL): "px-6 py-3 text-xl",
}
_DEFAULT_ITEM_SIZE = "px-4 py-2 text-base"


def _normalize(parts: list[str]) -> str:
    return " ".join(sorted(set(" ".join(parts).split())))


class SelectionStyles:
    """Immutable, chainable builder of CSS classes for selection components.

    Every setter returns a new builder; the original is left unchanged.
    """

    def __init__(self, color_provider: ColorProvider) -> None:
        self.color_provider = color_provider
        self.behavior = SelectionBehavior.SINGLE
        self.state = SelectionState.UNSELECTED
        self.display = SelectionDisplay.BUTTON
        self.layout = SelectionLayout.HORIZONTAL
        self.size = SelectionSize.MD
        self.interaction = SelectionInteraction.STANDARD
        self.show_counts = False
        self.show_clear_all = False
        self.extra_classes: tuple[str, ...] = ()

    def _with(self, **changes: object) -> SelectionStyles:
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, name, value)
        return clone

    # Behavior

    def no_selection(self) -> SelectionStyles:
        return self._with(behavior=SelectionBehavior.NONE)

    def single_selection(self) -> SelectionStyles:
        return self._with(behavior=SelectionBehavior.SINGLE)

    def multiple_selection(self) -> SelectionStyles:
        return self._with(behavior=SelectionBehavior.MULTIPLE)

    def toggle_selection(self) -> SelectionStyles:
        return self._with(behavior=SelectionBehavior.TOGGLE)

    # State

    def unselected(self) -> SelectionStyles:
        return self._with(state=SelectionState.UNSELECTED)

    def selected(self) -> SelectionStyles:
        return self._with(state=SelectionState.SELECTED)

    def partially_selected(self) -> SelectionStyles:
        return self._with(state=SelectionState.PARTIALLY_SELECTED)

    def disabled(self) -> SelectionStyles:
        return self._with(state=SelectionState.DISABLED)

    # Display

    def button_display(self) -> SelectionStyles:
        return self._with(display=SelectionDisplay.BUTTON)

    def chip_display(self) -> SelectionStyles:
        return self._with(display=SelectionDisplay.CHIP)

    def list_item_display(self) -> SelectionStyles:
        return self._with(display=SelectionDisplay.LIST_ITEM)

    def card_display(self) -> SelectionStyles:
        return self._with(display=SelectionDisplay.CARD)

    def tab_display(self) -> SelectionStyles:
        return self._with(display=SelectionDisplay.TAB)

    # Layout

    def horizontal_layout(self) -> SelectionStyles:
        return self._with(layout=SelectionLayout.HORIZONTAL)

    def vertical_layout(self) -> SelectionStyles:
        return self._with(layout=SelectionLayout.VERTICAL)

    def grid_layout(self) -> SelectionStyles:
        return self._with(layout=SelectionLayout.GRID)

    def dropdown_layout(self) -> SelectionStyles:
        return self._with(layout=SelectionLayout.DROPDOWN)

    def inline_layout(self) -> SelectionStyles:
        return self._with(layout=SelectionLayout.INLINE)

    # Size

    def xs(self) -> SelectionStyles:
        return self._with(size=SelectionSize.XS)

    def sm(self) -> SelectionStyles:
        return self._with(size=SelectionSize.SM)

    def md(self) -> SelectionStyles:
        return self._with(size=SelectionSize.MD)

    def lg(self) -> SelectionStyles:
        return self._with(size=SelectionSize.LG)

    def xl(self) -> SelectionStyles:
        return self._with(size=SelectionSize.XL)

    # Interaction

    def subtle_interaction(self) -> SelectionStyles:
        return self._with(interaction=SelectionInteraction.SUBTLE)

    def standard_interaction(self) -> SelectionStyles:
        return self._with(interaction=SelectionInteraction.STANDARD)

    def prominent_interaction(self) -> SelectionStyles:
        return self._with(interaction=SelectionInteraction.PROMINENT)

    # Features

    def with_counts(self, show_counts: bool) -> SelectionStyles:
        return self._with(show_counts=bool(show_counts))

    def with_clear_all(self, show_clear_all: bool) -> SelectionStyles:
        return self._with(show_clear_all=bool(show_clear_all))

    # String setters; unknown names fall back to the defaults

    def behavior_str(self, behavior: str) -> SelectionStyles:
        return self._with(behavior=_BEHAVIOR_NAMES.get(behavior, SelectionBehavior.SINGLE))

    def state_str(self, state: str) -> SelectionStyles:
        return self._with(state=_STATE_NAMES.get(state, SelectionState.UNSELECTED))

    def display_str(self, display: str) -> SelectionStyles:
        return self._with(display=_DISPLAY_NAMES.get(display, SelectionDisplay.BUTTON))

    def layout_str(self, layout: str) -> SelectionStyles:
        return self._with(layout=_LAYOUT_NAMES.get(layout, SelectionLayout.HORIZONTAL))

    def size_str(self, size: str) -> SelectionStyles:
        return self._with(size=_SIZE_NAMES.get(size, SelectionSize.MD))

    def interaction_str(self, interaction: str) -> SelectionStyles:
        return self._with(
            interaction=_INTERACTION_NAMES.get(interaction, SelectionInteraction.STANDARD)
        )

    # Custom classes

    def custom(self, css_class: str) -> SelectionStyles:
        return self._with(extra_classes=(*self.extra_classes, css_class))

    def custom_classes(self, classes: str) -> SelectionStyles:
        return self._with(extra_classes=(*self.extra_classes, *classes.split()))

    # Output

    def container_classes(self) -> str:
        """Sorted, de-duplicated classes for the group container."""
        parts = [
            "selection-pattern",
            _LAYOUT_CLASSES[self.layout],
            _SPACING_CLASSES[self.size],
            *self.extra_classes,
        ]
        return _normalize(parts)

    def item_classes(self) -> str:
        """Sorted, de-duplicated classes for one selectable item."""
        parts = [
            "selection-item",
            _DISPLAY_CLASSES[self.display],
            _ITEM_SIZE_CLASSES.get((self.display, self.size), _DEFAULT_ITEM_SIZE),
            self._state_classes(),
            self._interaction_classes(),
        ]
        return _normalize(parts)

    def count_classes(self) -> str:
        """Classes for the count badge, or an empty string when counts are off."""
        if not self.show_counts:
            return ""
        cp = self.color_provider
        if self.state is SelectionState.SELECTED:
            colors = f"{cp.bg_class(Color.PRIMARY)} {cp.text_class(Color.TEXT_INVERSE)}"
        else:
            colors = f"{cp.bg_class(Color.BACKGROUND)} {cp.text_class(Color.TEXT_SECONDARY)}"
        return f"ml-2 px-2 py-0.5 text-xs rounded-full {colors}"

    def _state_classes(self) -> str:
        cp = self.color_provider
        if self.state is SelectionState.UNSELECTED:
            bg, text, border = Color.SURFACE, Color.TEXT_PRIMARY, Color.BORDER
        elif self.state is SelectionState.SELECTED:
            bg, text, border = Color.PRIMARY, Color.TEXT_INVERSE, Color.PRIMARY
        elif self.state is SelectionState.PARTIALLY_SELECTED:
            bg, text, border = Color.BACKGROUND, Color.PRIMARY, Color.PRIMARY
        else:
            bg, text, border = (
                Color.INTERACTIVE_DISABLED,
                Color.TEXT_TERTIARY,
                Color.INTERACTIVE_DISABLED,
            )
        return f"{cp.bg_class(bg)} {cp.text_class(text)} {cp.border_class(border)}"

    def _interaction_classes(self) -> str:
        if self.state is SelectionState.DISABLED:
            return "cursor-not-allowed"
        cp = self.color_provider
        parts = ["cursor-pointer"]
        unselected = self.state is SelectionState.UNSELECTED
        if self.interaction is SelectionInteraction.SUBTLE:
            parts.append("hover:opacity-80")
        elif self.interaction is SelectionInteraction.STANDARD:
            if unselected:
                parts.append(
                    f"hover:{cp.bg_class(Color.BACKGROUND)} "
                    f"hover:{cp.border_class(Color.INTERACTIVE)}"
                )
            parts.append("hover:scale-105 active:scale-95")
        else:
            if unselected:
                parts.append(
                    f"hover:{cp.bg_class(Color.INTERACTIVE)} "
                    f"hover:{cp.text_class(Color.TEXT_INVERSE)}"
                )
            parts.append("hover:scale-110 active:scale-90 shadow-lg hover:shadow-xl")
        return " ".join(parts)


def selection_styles(color_provider: ColorProvider) -> SelectionStyles:
    return SelectionStyles(color_provider)


def filter_selection_styles(color_provider: ColorProvider) -> SelectionStyles:
    return (
        SelectionStyles(color_provider)
        .single_selection()
        .button_display()
        .horizontal_layout()
        .standard_interaction()
        .with_counts(True)
    )


def chip_selection_styles(color_provider: ColorProvider) -> SelectionStyles:
    return (
        SelectionStyles(color_provider)
        .multiple_selection()
        .chip_display()
        .inline_layout()
        .subtle_interaction()
        .with_clear_all(True)
    )


def tab_selection_styles(color_provider: ColorProvider) -> SelectionStyles:
    return (
        SelectionStyles(color_provider)
        .single_selection()
        .tab_display()
        .horizontal_layout()
        .standard_interaction()
    )


def selection_classes_from_strings(
    color_provider: ColorProvider,
    behavior: str,
    state: str,
    display: str,
    layout: str,
    size: str,
    interaction: str,
    show_counts: bool,
) -> tuple[str, str]:
    """Build (container classes, item classes) in one call from string options."""
    builder = (
        SelectionStyles(color_provider)
        .behavior_str(behavior)
        .state_str(state)
        .display_str(display)
        .layout_str(layout)
        .size_str(size)
        .interaction_str(interaction)
        .with_counts(show_counts)
    )
    return builder.container_classes(), builder.item_classes()