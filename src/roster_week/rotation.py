"""
Weekly rotation of the team list.
"""

from typing import List, Sequence

from .errors import EmptyRosterError


def rotation_offset(team_size: int, iso_week: int) -> int:
    """Index of the team member placed on the first row for a given week."""
    if team_size <= 0:
        raise EmptyRosterError("Team list has no members")
    return iso_week % team_size


def rotate_team(team_list: Sequence[str], iso_week: int) -> List[str]:
    """
    Rotate the team list left by the week's offset.

    The same matrix row therefore falls to a different person every week,
    cycling through the whole team with period len(team_list).

    Args:
        team_list: Team member names in configured order
        iso_week: ISO week number

    Returns:
        New list with the rotated names

    Raises:
        EmptyRosterError: If the team list is empty
    """
    offset = rotation_offset(len(team_list), iso_week)
    return list(team_list[offset:]) + list(team_list[:offset])
