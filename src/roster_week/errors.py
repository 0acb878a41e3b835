"""
Exceptions raised while building a weekly roster.
"""


class RosterError(Exception):
    """Base exception for roster computation errors."""

    pass


class InvalidWeekError(RosterError):
    """Raised when the requested ISO week does not exist in the requested year."""

    pass


class EmptyRosterError(RosterError):
    """Raised when the team list has no members."""

    pass


class InconsistentMatrixShapeError(RosterError):
    """Raised when the roster matrix does not match the team or has ragged rows."""

    pass
