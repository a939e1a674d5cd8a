# SPDX-License-Identifier: MIT

# Colors assigned to packages in first-seen order.
# These colors are chosen for good visibility in terminal displays.
PACKAGE_COLORS = [
    "cyan",
    "magenta",
    "green",
    "yellow",
    "blue",
    "red",
    "bright_cyan",
    "bright_magenta",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_red",
]

HEADER_COLOR = "dark_orange"
COMMAND_COLOR = "sandy_brown"
CACHE_HIT_COLOR = "green"
CACHE_MISS_COLOR = "yellow"
