import pytest

from jupiter_styles.colors import Color, ColorProvider
from jupiter_styles.state import (
    StateStyles,
    empty_state_styles,
    error_state_styles,
    loading_state_styles,
    state_classes_from_strings,
    state_styles,
    success_state_styles,
)


@pytest.fixture
def colors():
    return ColorProvider()


def test_state_styles_new(colors):
    classes = StateStyles(colors).classes()
    for expected in (
        "state-pattern",
        "flex",
        "flex-col",
        "items-center",
        "text-center",
        "px-8",
        "py-16",
    ):
        assert expected in classes


def test_intent_methods(colors):
    classes = StateStyles(colors).informational().classes()
    assert "bg-gray-50" in classes
    assert "text-gray-900" in classes

    assert "text-jupiter-blue-500" in StateStyles(colors).loading().classes()

    classes = StateStyles(colors).success().classes()
    assert "text-green-600" in classes
    assert "bg-green-50" in classes

    classes = StateStyles(colors).warning().classes()
    assert "text-orange-600" in classes
    assert "bg-orange-50" in classes

    classes = StateStyles(colors).error().classes()
    assert "text-red-600" in classes
    assert "bg-red-50" in classes

    assert "text-gray-600" in StateStyles(colors).empty().classes()


def test_prominence_methods(colors):
    for builder in (
        StateStyles(colors).subtle(),
        StateStyles(colors).standard(),
        StateStyles(colors).prominent(),
    ):
        assert "flex" in builder.classes().split()


@pytest.mark.parametrize(
    "method, px, py",
    [
        ("xs", "px-4", "py-8"),
        ("sm", "px-6", "py-12"),
        ("md", "px-8", "py-16"),
        ("lg", "px-12", "py-20"),
        ("xl", "px-16", "py-24"),
    ],
)
def test_size_methods(colors, method, px, py):
    classes = getattr(StateStyles(colors), method)().classes().split()
    assert px in classes
    assert py in classes


def test_alignment_methods(colors):
    classes = StateStyles(colors).left_aligned().classes()
    assert "items-start" in classes
    assert "text-left" in classes

    classes = StateStyles(colors).center_aligned().classes()
    assert "items-center" in classes
    assert "text-center" in classes

    classes = StateStyles(colors).right_aligned().classes()
    assert "items-end" in classes
    assert "text-right" in classes


def test_loading_variant_methods(colors):
    classes = StateStyles(colors).spinner().classes()
    for expected in ("animate-spin", "border-4", "border-t-transparent", "rounded-full"):
        assert expected in classes

    classes = StateStyles(colors).dots().classes()
    assert "animate-bounce" in classes
    assert "rounded-full" in classes

    classes = StateStyles(colors).pulse().classes()
    assert "animate-pulse" in classes
    assert "rounded-full" in classes

    classes = StateStyles(colors).bars().classes()
    assert "animate-pulse" in classes
    assert "rounded-sm" in classes

    classes = StateStyles(colors).skeleton().classes().split()
    assert "animate-pulse" in classes
    assert "rounded" in classes


def test_fullscreen_methods(colors):
    classes = StateStyles(colors).fullscreen(True).classes()
    assert "min-h-screen" in classes
    assert "justify-center" in classes

    assert "min-h-screen" not in StateStyles(colors).fullscreen(False).classes()

    classes = StateStyles(colors).is_fullscreen().classes()
    assert "min-h-screen" in classes
    assert "justify-center" in classes


def test_custom_classes(colors):
    assert "custom-class" in StateStyles(colors).custom("custom-class").classes()

    classes = StateStyles(colors).custom_classes("class1 class2 class3").classes().split()
    assert {"class1", "class2", "class3"} <= set(classes)

    classes = StateStyles(colors).custom("first").custom("second").classes().split()
    assert "first" in classes
    assert "second" in classes


def test_string_convenience_methods(colors):
    assert "text-red-600" in StateStyles(colors).intent_str("error").classes()

    assert StateStyles(colors).prominence_str("prominent").prominence.value == "prominent"

    classes = StateStyles(colors).size_str("lg").classes()
    assert "px-12" in classes
    assert "py-20" in classes

    classes = StateStyles(colors).alignment_str("left").classes()
    assert "items-start" in classes
    assert "text-left" in classes

    assert "animate-spin" in StateStyles(colors).loading_variant_str("spinner").classes()


def test_intent_aliases(colors):
    assert StateStyles(colors).intent_str("warn").classes() == StateStyles(colors).warning().classes()
    assert (
        StateStyles(colors).error().intent_str("info").classes()
        == StateStyles(colors).informational().classes()
    )


def test_suggested_icon(colors):
    assert StateStyles(colors).loading().suggested_icon() == "loader"
    assert StateStyles(colors).error().suggested_icon() == "alert-circle"
    assert StateStyles(colors).success().suggested_icon() == "check-circle"
    assert StateStyles(colors).empty().suggested_icon() == "inbox"
    assert StateStyles(colors).warning().suggested_icon() == "alert-triangle"
    assert StateStyles(colors).informational().suggested_icon() == "info"


def test_suggested_action_text(colors):
    assert StateStyles(colors).error().recommended_action().suggested_action_text() == "Try Again"
    assert StateStyles(colors).empty().optional_action().suggested_action_text() == "Refresh"
    assert StateStyles(colors).loading().no_action().suggested_action_text() is None
    assert StateStyles(colors).empty().recommended_action().suggested_action_text() == "Add Item"
    assert StateStyles(colors).warning().required_action().suggested_action_text() == "Take Action"


def test_size_helper_methods(colors):
    assert StateStyles(colors).md().content_size_classes() == "text-2xl"
    assert StateStyles(colors).lg().content_size_classes() == "text-3xl"
    assert StateStyles(colors).md().description_size_classes() == "text-lg"
    assert StateStyles(colors).md().icon_size_classes() == "w-16 h-16"
    assert StateStyles(colors).md().spinner().loading_size_classes() == "w-12 h-12"
    assert StateStyles(colors).md().dots().loading_size_classes() == "w-4 h-4"
    assert StateStyles(colors).md().pulse().loading_size_classes() == "w-8 h-8"


def test_convenience_functions(colors):
    assert "state-pattern" in state_styles(colors).classes()

    classes = loading_state_styles(colors).classes()
    assert "animate-spin" in classes
    assert "border-4" in classes

    assert "text-gray-600" in empty_state_styles(colors).classes()

    classes = error_state_styles(colors).classes()
    assert "text-red-600" in classes
    assert "bg-red-50" in classes

    classes = success_state_styles(colors).classes()
    assert "text-green-600" in classes
    assert "bg-green-50" in classes


def test_state_classes_from_strings(colors):
    classes = state_classes_from_strings(
        colors, "error", "prominent", "lg", "center", "spinner", True
    )
    for expected in (
        "text-red-600",
        "bg-red-50",
        "px-12",
        "py-20",
        "items-center",
        "text-center",
        "animate-spin",
        "min-h-screen",
    ):
        assert expected in classes


def test_state_classes_from_strings_without_variant(colors):
    classes = state_classes_from_strings(colors, "info", "standard", "md", "left", None, False)
    assert "animate-spin" not in classes
    assert "items-start" in classes


def test_complex_state_composition(colors):
    classes = (
        StateStyles(colors)
        .error()
        .prominent()
        .lg()
        .center_aligned()
        .recommended_action()
        .is_fullscreen()
        .custom("rounded-lg")
        .custom_classes("shadow-lg border")
        .classes()
    ).split()
    for expected in (
        "state-pattern",
        "text-red-600",
        "bg-red-50",
        "px-12",
        "py-20",
        "items-center",
        "text-center",
        "min-h-screen",
        "rounded-lg",
        "shadow-lg",
        "border",
    ):
        assert expected in classes


def test_class_deduplication(colors):
    classes = StateStyles(colors).custom("flex").center_aligned().classes()
    assert classes.split().count("flex") == 1


def test_classes_are_sorted(colors):
    tokens = StateStyles(colors).error().is_fullscreen().custom("zzz").custom("aaa").classes().split()
    assert tokens == sorted(tokens)
    assert len(tokens) == len(set(tokens))


def test_fallback_values(colors):
    classes = (
        StateStyles(colors)
        .intent_str("invalid")
        .prominence_str("invalid")
        .size_str("invalid")
        .alignment_str("invalid")
        .loading_variant_str("invalid")
        .classes()
    )
    assert "text-gray-900" in classes
    assert "px-8" in classes
    assert "py-16" in classes
    assert "items-center" in classes
    assert "animate-spin" not in classes


def test_build_alias(colors):
    styles = StateStyles(colors).error().prominent().lg()
    assert styles.classes() == styles.build()


def test_builder_is_immutable(colors):
    base = StateStyles(colors)
    base.error().custom("extra")
    assert base.classes() == StateStyles(colors).classes()
    assert "extra" not in base.classes()


def test_custom_palette_is_used():
    provider = ColorProvider({Color.PRIMARY: "indigo-600"})
    assert "text-indigo-600" in StateStyles(provider).loading().classes()
    assert provider.bg_class(Color.PRIMARY) == "bg-indigo-600"
    assert provider.border_class(Color.BORDER) == "border-gray-200"