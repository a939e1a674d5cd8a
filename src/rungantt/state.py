# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

# Overrides from global command line options, None defers to the config file
_force_color: ContextVar[Optional[bool]] = ContextVar("force_color", default=None)
_show_header: ContextVar[Optional[bool]] = ContextVar("show_header", default=None)
_plain: ContextVar[bool] = ContextVar("plain", default=False)


def set_force_color(value: Optional[bool]) -> None:
    _force_color.set(value)


def get_force_color() -> Optional[bool]:
    return _force_color.get()


def set_show_header(value: Optional[bool]) -> None:
    _show_header.set(value)


def get_show_header() -> Optional[bool]:
    return _show_header.get()


def set_plain(value: bool) -> None:
    _plain.set(value)


def get_plain() -> bool:
    return _plain.get()
