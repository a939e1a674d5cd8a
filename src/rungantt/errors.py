# SPDX-License-Identifier: MIT


class SummaryError(Exception):
    """A run summary could not be located, read, or understood."""


class EmptyTimelineError(ValueError):
    """A timeline was requested for a run with no tasks."""
