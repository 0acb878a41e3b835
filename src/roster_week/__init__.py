"""
Roster Week - Weekly shift roster by person and by shift.
"""

__version__ = "0.1.0"

from .config import ConfigLoader, ConfigurationError
from .errors import (
    EmptyRosterError,
    InconsistentMatrixShapeError,
    InvalidWeekError,
    RosterError,
)
from .models import (
    PersonRow,
    RosterConfig,
    RosterWeek,
    ShiftDefinition,
    ShiftRow,
    WeekLabel,
)
from .pivot import pivot
from .reporter import RosterReporter
from .roster import RosterBuilder
from .rotation import rotate_team
from .week import resolve_week

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "RosterError",
    "InvalidWeekError",
    "EmptyRosterError",
    "InconsistentMatrixShapeError",
    "ShiftDefinition",
    "RosterConfig",
    "PersonRow",
    "ShiftRow",
    "WeekLabel",
    "RosterWeek",
    "resolve_week",
    "rotate_team",
    "pivot",
    "RosterBuilder",
    "RosterReporter",
]
