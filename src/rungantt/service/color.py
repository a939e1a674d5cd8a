# SPDX-License-Identifier: MIT

from typing import Optional

from rungantt.color import PACKAGE_COLORS


class PackageColors:
    """Assigns palette colors to packages in the order they are first seen.

    Callers ask in display order (after grouping), not input order, so the
    first package on screen always gets the first palette color.

    One instance covers one render; the palette wraps around once exhausted.
    """

    def __init__(self, palette: Optional[list[str]] = None) -> None:
        self.palette = palette if palette is not None else PACKAGE_COLORS
        self._assigned: dict[str, str] = {}

    def color_for(self, package: str) -> str:
        if package not in self._assigned:
            index = len(self._assigned) % len(self.palette)
            self._assigned[package] = self.palette[index]
        return self._assigned[package]
