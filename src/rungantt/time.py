# SPDX-License-Identifier: MIT

import math

import pendulum


def epoch_ms_to_datetime(epoch_ms: int) -> pendulum.DateTime:
    return pendulum.from_timestamp(epoch_ms / 1000, tz="UTC")


def epoch_ms_to_display_local_datetime_str(epoch_ms: int) -> str:
    return epoch_ms_to_datetime(epoch_ms).in_tz("local").format("YYYY-MM-DD ddd HH:mm:ss")


def format_duration(duration_ms: float) -> str:
    """Format a millisecond duration for display.

    Durations under a second render as whole milliseconds ("120ms"). Longer
    durations render as seconds floored to two decimals ("1.99s" for 1999ms),
    never rounded up.
    """
    if duration_ms < 1000:
        return f"{math.floor(duration_ms)}ms"
    hundredths = math.floor(duration_ms) // 10
    return f"{hundredths // 100}.{hundredths % 100:02d}s"
