# gridpath/core/errors.py
#!/usr/bin/env python3
"""Exceptions raised by the board and the search engine."""


class GridPathError(Exception):
    """Base class for every gridpath error."""


class BoardConfigError(GridPathError, ValueError):
    """Board dimensions, wall range or a start position cannot be used."""


class StartOnWallError(BoardConfigError):
    """The search was asked to start on a Wall cell."""


class GoalNotFoundError(GridPathError, LookupError):
    """No cell on the board has kind GOAL (setup never ran?)."""


class SearchNotFinishedError(GridPathError, RuntimeError):
    """A path was requested before the search reached the goal."""


class MapFormatError(GridPathError, ValueError):
    """A JSON map file is malformed."""
