"""
Pivoting of the person/day assignment matrix into shift/day rows.

The person view pairs each rotated name with its matrix row. The shift
view is built in two passes: discovery creates one padded row per shift
id present in the matrix, aggregation fills each day slot with the names
working that shift.
"""

from typing import Iterable, List, Sequence, Tuple

from .errors import InconsistentMatrixShapeError
from .models import PersonRow, ShiftDefinition, ShiftRow

NAME_SEPARATOR = "\n"


def validate_matrix_shape(
    names: Sequence[str], matrix: Sequence[Sequence[int]]
) -> int:
    """
    Check that the matrix has one row per name and equal-length rows.

    Returns:
        The week length (number of columns)

    Raises:
        InconsistentMatrixShapeError: If the shape does not match
    """
    if len(matrix) != len(names):
        raise InconsistentMatrixShapeError(
            f"Roster matrix has {len(matrix)} rows but the team has "
            f"{len(names)} members"
        )

    if not matrix:
        return 0

    week_length = len(matrix[0])
    for index, row in enumerate(matrix):
        if len(row) != week_length:
            raise InconsistentMatrixShapeError(
                f"Roster matrix row {index} ({names[index]}) has {len(row)} "
                f"days, expected {week_length}"
            )

    return week_length


def build_person_rows(
    names: Sequence[str], matrix: Sequence[Sequence[int]]
) -> List[PersonRow]:
    """Pair each name with its matrix row, preserving order."""
    return [
        PersonRow(name=name, shifts_per_day=list(row))
        for name, row in zip(names, matrix)
    ]


def discover_shift_rows(
    matrix: Iterable[Sequence[int]], week_length: int
) -> List[ShiftRow]:
    """
    Create an empty shift row for every distinct shift id in the matrix.

    Rows are padded with empty strings to the full week length and
    sorted ascending by shift id.
    """
    seen = set()
    shift_rows = []

    for row in matrix:
        for shift_id in row:
            if shift_id not in seen:
                seen.add(shift_id)
                shift_rows.append(
                    ShiftRow(shift_id=shift_id, names_per_day=[""] * week_length)
                )

    shift_rows.sort(key=lambda r: r.shift_id)
    return shift_rows


def fill_shift_rows(
    shift_rows: List[ShiftRow], person_rows: Sequence[PersonRow]
) -> List[ShiftRow]:
    """
    Place every person's name into the shift row slot for each day worked.

    Names sharing a shift on the same day are joined with a line break
    in person row order.
    """
    by_id = {row.shift_id: row for row in shift_rows}

    for person in person_rows:
        for day_index, shift_id in enumerate(person.shifts_per_day):
            names = by_id[shift_id].names_per_day
            if names[day_index]:
                names[day_index] += NAME_SEPARATOR + person.name
            else:
                names[day_index] = person.name

    return shift_rows


def build_shift_rows(
    person_rows: Sequence[PersonRow], week_length: int
) -> List[ShiftRow]:
    """Build the shift view from the person view."""
    shift_rows = discover_shift_rows(
        (person.shifts_per_day for person in person_rows), week_length
    )
    return fill_shift_rows(shift_rows, person_rows)


def pivot(
    names: Sequence[str],
    matrix: Sequence[Sequence[int]],
    shift_catalog: Iterable[ShiftDefinition] = (),
) -> Tuple[List[PersonRow], List[ShiftRow]]:
    """
    Build the person view and the shift view of a roster matrix.

    Only shift ids present in the matrix get a shift row; the catalog is
    not used to add or filter rows.

    Args:
        names: Team member names in rotated order
        matrix: Shift id per person (rows) and day (columns)
        shift_catalog: Defined shifts

    Returns:
        Tuple of (person_rows, shift_rows)

    Raises:
        InconsistentMatrixShapeError: If the matrix shape is invalid
    """
    week_length = validate_matrix_shape(names, matrix)
    person_rows = build_person_rows(names, matrix)
    shift_rows = build_shift_rows(person_rows, week_length)
    return person_rows, shift_rows
