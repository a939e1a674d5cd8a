# SPDX-License-Identifier: MIT

from typing import Optional, Protocol

from rich.console import Console
from rich.text import Text

from rungantt.configuration import DimStyle
from rungantt.model.render_settings import RenderSettings

MUTED = "muted"
BAR = "bar"
MARKER = "marker"
MARKER_IN_BAR = "marker_in_bar"
DURATION = "duration"
AXIS = "axis"


class Styler(Protocol):
    """Turns a semantic style token and some text into renderable text.

    Tokens that draw package colored cells (BAR, MARKER_IN_BAR) take the
    package color as well.
    """

    def apply(self, token: str, text: str, color: Optional[str] = None) -> Text: ...


class AnsiStyler:
    def __init__(self, dim_style: DimStyle = "dim") -> None:
        # Some terminals ignore the dim attribute, gray still reads as muted
        self.muted = "dim" if dim_style == "dim" else "bright_black"

    def apply(self, token: str, text: str, color: Optional[str] = None) -> Text:
        if token == BAR:
            return Text(text, style=color or "")
        if token == MARKER_IN_BAR:
            return Text(text, style=f"reverse {color}" if color else "reverse")
        if token in (MUTED, MARKER, DURATION, AXIS):
            return Text(text, style=self.muted)
        return Text(text)


class PlainStyler:
    def apply(self, token: str, text: str, color: Optional[str] = None) -> Text:
        return Text(text)


def get_styler(settings: RenderSettings) -> Styler:
    if settings["plain"]:
        return PlainStyler()
    return AnsiStyler(settings["dim_style"])


def get_console(settings: RenderSettings) -> Console:
    return Console(
        force_terminal=True if settings["force_color"] and not settings["plain"] else None,
        no_color=settings["plain"],
        highlight=False,
    )
