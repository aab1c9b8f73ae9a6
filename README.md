# jupiter-styles

Chainable builders that produce Tailwind CSS class strings for status and
loading displays and for selectable items. There are also two small helpers
for text. The builders do not depend on any UI framework. You pass the
strings they return to whatever renders your markup.

## Installation

```
pip install jupiter-styles
```

The package has no runtime dependencies.

## Colours

`jupiter_styles.colors.ColorProvider` maps a semantic `Color` to Tailwind
colour tokens. Examples of `Color` values are `PRIMARY`, `SURFACE`, `BORDER`,
`TEXT_SECONDARY` and `INTERACTIVE_DISABLED`. The provider turns them into
classes with `bg_class`, `text_class` and `border_class`:

```python
from jupiter_styles.colors import Color, ColorProvider

colors = ColorProvider()
colors.bg_class(Color.PRIMARY)        # "bg-jupiter-blue-500"
colors.text_class(Color.TEXT_PRIMARY) # "text-gray-900"

themed = ColorProvider({Color.PRIMARY: "indigo-600"})
themed.border_class(Color.PRIMARY)    # "border-indigo-600"
```

Any colour you do not pass in keeps its default token. `palette` returns the
mapping in use, read-only, and `token(color)` returns a single token.

## Builders are immutable

Every setter on `StateStyles` and `SelectionStyles` returns a new builder and
leaves the original unchanged. You can keep a base builder and derive variants
from it. The output methods return sorted class strings with duplicates
removed.

## State styles

```python
from jupiter_styles.colors import ColorProvider
from jupiter_styles.state import StateStyles, error_state_styles

colors = ColorProvider()

classes = StateStyles(colors).loading().center_aligned().spinner().md().classes()

error = error_state_styles(colors)
error.suggested_icon()         # "alert-circle"
error.suggested_action_text()  # "Try Again"
```

`StateStyles` sets each of these:

- intent: `informational`, `loading`, `success`, `warning`, `error`, `empty`
- prominence: `subtle`, `standard`, `prominent`
- size: `xs` to `xl`
- alignment: `left_aligned`, `center_aligned`, `right_aligned`
- action requirement: `no_action`, `optional_action`, `recommended_action`, `required_action`
- loading variant: `spinner`, `dots`, `pulse`, `bars`, `skeleton`
- layout: `fullscreen(flag)` or `is_fullscreen()`
- extra classes: `custom(css_class)` adds one class; `custom_classes("a b c")` adds several

`classes()` and `build()` return the same string. Four more methods give the
sizes for the parts of a state display: `content_size_classes`,
`description_size_classes`, `icon_size_classes` and `loading_size_classes`.

There are ready-made starting points: `state_styles`, `loading_state_styles`,
`empty_state_styles`, `error_state_styles` and `success_state_styles`.
`state_classes_from_strings(colors, intent, prominence, size, alignment,
loading_variant, fullscreen)` builds the classes in one call from string
options. It accepts `"info"` and `"warn"` as short forms, and
`loading_variant` may be `None`. An unknown value falls back to that option's
default. An unknown loading variant means no loading animation.

## Selection styles

```python
from jupiter_styles.colors import ColorProvider
from jupiter_styles.selection import SelectionStyles, chip_selection_styles

colors = ColorProvider()

styles = SelectionStyles(colors).single_selection().button_display().horizontal_layout()
container = styles.container_classes()
item = styles.selected().item_classes()

chips = chip_selection_styles(colors)
```

`SelectionStyles` sets each of these:

- behaviour: `no_selection`, `single_selection`, `multiple_selection`, `toggle_selection`
- state: `unselected`, `selected`, `partially_selected`, `disabled`
- display: `button_display`, `chip_display`, `list_item_display`, `card_display`, `tab_display`
- layout: `horizontal_layout`, `vertical_layout`, `grid_layout`, `dropdown_layout`, `inline_layout`
- size: `xs` to `xl`
- interaction: `subtle_interaction`, `standard_interaction`, `prominent_interaction`
- features: `with_counts(flag)` and `with_clear_all(flag)`

It has three output methods:

- `container_classes()` styles the group.
- `item_classes()` styles one item. A disabled item gets `cursor-not-allowed` and no hover effects.
- `count_classes()` styles the count badge. It returns `""` unless counts are on.

The ready-made starting points are `selection_styles`,
`filter_selection_styles`, `chip_selection_styles` and `tab_selection_styles`.
`selection_classes_from_strings(...)` returns a `(container, item)` pair built
from string options. It accepts `"active"`, `"inactive"`, `"partial"` and
`"list"` as aliases. Unknown values fall back to the defaults.

## Text helpers

```python
from jupiter_styles.text import text_element_from_hierarchy, text_clamp_style

text_element_from_hierarchy("heading")  # "h2"
text_element_from_hierarchy("unknown")  # "p"
text_clamp_style(3)     # inline CSS that clamps text to three lines
text_clamp_style(None)  # ""
```

`text_clamp_style` raises `ValueError` if the line count is negative.

## What is not included

There is no chainable builder for text or typography classes. This package
does not generate classes for font size, weight or colour. The text module
offers only the two helpers above. The package renders no components and
ships no stylesheet. It only produces class strings.

## Running the tests

```
pip install -e ".[test]"
pytest
```