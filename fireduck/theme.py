"""UI palette, reusable widgets and interaction feedback."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional

from fireduck.audio import AudioInstance, sound_effect


def _channel_byte(value: float) -> int:
    return round(max(0.0, min(1.0, value)) * 255)


@dataclass(frozen=True)
class Color:
    """An sRGB colour with alpha, each channel in ``0.0..=1.0``."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_hex(self) -> str:
        """``#rrggbb``, or ``#rrggbbaa`` when the colour is not opaque."""
        channels = [self.r, self.g, self.b]
        if self.a != 1.0:
            channels.append(self.a)
        return "#" + "".join(f"{_channel_byte(c):02x}" for c in channels)


LABEL_TEXT = Color(0.867, 0.827, 0.412)
HEADER_TEXT = Color(0.988, 0.984, 0.800)
BUTTON_TEXT = Color(0.925, 0.925, 0.925)
BUTTON_BACKGROUND = Color(0.275, 0.400, 0.750)
BUTTON_HOVERED_BACKGROUND = Color(0.384, 0.600, 0.820)
BUTTON_PRESSED_BACKGROUND = Color(0.239, 0.286, 0.600)

HEADER_FONT_SIZE = 40.0
LABEL_FONT_SIZE = 24.0
BUTTON_FONT_SIZE = 40.0


class Interaction(enum.Enum):
    """How the pointer is currently interacting with a widget."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


@dataclass(frozen=True)
class InteractionPalette:
    """Background colours for each interaction state of a widget."""

    none: Color
    hovered: Color
    pressed: Color

    def color_for(self, interaction: Interaction) -> Color:
        return {
            Interaction.NONE: self.none,
            Interaction.HOVERED: self.hovered,
            Interaction.PRESSED: self.pressed,
        }[interaction]


BUTTON_PALETTE = InteractionPalette(
    none=BUTTON_BACKGROUND,
    hovered=BUTTON_HOVERED_BACKGROUND,
    pressed=BUTTON_PRESSED_BACKGROUND,
)


@dataclass(frozen=True)
class InteractionAssets:
    """Sounds played when interactive widgets are hovered or clicked."""

    hover: str = "audio/sound_effects/button_hover.ogg"
    click: str = "audio/sound_effects/button_click.ogg"


Action = Callable[[Any], None]


@dataclass
class Widget:
    """A UI node with optional text, styling, click action and children."""

    name: str
    text: Optional[str] = None
    font_size: Optional[float] = None
    color: Optional[Color] = None
    background: Optional[Color] = None
    palette: Optional[InteractionPalette] = None
    action: Optional[Action] = None
    style: Dict[str, Any] = field(default_factory=dict)
    children: List[Widget] = field(default_factory=list)
    pickable: bool = True
    z_index: Optional[int] = None
    scope: Any = None
    tag: Optional[str] = None

    def __iter__(self) -> Iterator[Widget]:
        """This widget and all its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child

    def find(self, text: str) -> Widget:
        """The first widget showing ``text``; for a button, the part holding its action."""
        for widget in self:
            if widget.text == text:
                return widget
            if widget.action is not None and any(
                inner.text == text for inner in widget.children_tree()
            ):
                return widget
        raise KeyError(text)

    def children_tree(self) -> Iterator[Widget]:
        for child in self.children:
            yield from child


def ui_root(name: str) -> Widget:
    """A root node that fills the window and centres its content in a column."""
    return Widget(
        name=name,
        style={
            "position_type": "absolute",
            "width": "100%",
            "height": "100%",
            "align_items": "center",
            "justify_content": "center",
            "flex_direction": "column",
            "row_gap": 20.0,
        },
        pickable=False,
    )


def header(text: str) -> Widget:
    """A large header label."""
    return Widget(name="Header", text=text, font_size=HEADER_FONT_SIZE, color=HEADER_TEXT)


def label(text: str) -> Widget:
    """A plain text label."""
    return Widget(name="Label", text=text, font_size=LABEL_FONT_SIZE, color=LABEL_TEXT)


def _button_base(text: str, action: Action, style: Dict[str, Any]) -> Widget:
    button_text = Widget(
        name="Button Text",
        text=text,
        font_size=BUTTON_FONT_SIZE,
        color=BUTTON_TEXT,
        pickable=False,
    )
    inner = Widget(
        name="Button Inner",
        background=BUTTON_BACKGROUND,
        palette=BUTTON_PALETTE,
        action=action,
        style=style,
        children=[button_text],
    )
    return Widget(name="Button", children=[inner])


def button(text: str, action: Action) -> Widget:
    """A large rounded button running ``action`` when clicked."""
    return _button_base(
        text,
        action,
        {
            "width": 380.0,
            "height": 80.0,
            "align_items": "center",
            "justify_content": "center",
            "border_radius": "max",
        },
    )


def button_small(text: str, action: Action) -> Widget:
    """A small square button running ``action`` when clicked."""
    return _button_base(
        text,
        action,
        {
            "width": 30.0,
            "height": 30.0,
            "align_items": "center",
            "justify_content": "center",
        },
    )


def interaction_sound(
    assets: Optional[InteractionAssets], event: Interaction, interactive: bool
) -> Optional[AudioInstance]:
    """The sound to play for a hover or click on a widget, if any."""
    if assets is None or not interactive:
        return None
    if event is Interaction.HOVERED:
        return sound_effect(assets.hover)
    if event is Interaction.PRESSED:
        return sound_effect(assets.click)
    return None