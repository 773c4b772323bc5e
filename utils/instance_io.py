"""
Instance / solution file utilities for the separation batch.

This module provides:
    • instance_filename(n) / solution_filename(n)
    • parse_instance(text, instance)
    • validate_points(coordinates, instance)
    • read_instance_file(n, directory)
    • ensure_output_dir(path)
    • write_solution(path, lines)

Handles all filesystem interaction in a consistent, testable way.

Instance format: whitespace separated integers, the declared point
count first, then one `x y` pair per point.
Solution format: the line count, then one `v <intercept>` or
`h <intercept>` row per line.
"""

import os
from typing import List, Tuple

from utils.errors import (
    EmptyInstanceError,
    InstanceFormatError,
    InstanceNotFoundError,
    InvalidPointsError,
    PointCountMismatchError,
)
from config import get_active_params


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def instance_filename(n: int) -> str:
    """
    Example:
        instance_filename(7) → 'instance07'
    """
    return get_active_params()["INSTANCE_PATTERN"].format(n)


def solution_filename(n: int) -> str:
    """
    Example:
        solution_filename(7) → 'greedy_solution_07'
    """
    return get_active_params()["SOLUTION_PATTERN"].format(n)


# -------------------------------------------------------------------------
#  INSTANCE PARSING
# -------------------------------------------------------------------------

def _to_int(token: str, instance) -> int:
    try:
        return int(token)
    except ValueError:
        raise InstanceFormatError(instance, token) from None


def parse_instance(text: str, instance=0) -> List[Tuple[int, int]]:
    """
    Turns the contents of an instance file into a list of (x, y) pairs.

    Raises:
        EmptyInstanceError       no header, a zero count, or header only
        InstanceFormatError      a token that is not an integer
        PointCountMismatchError  pairs found != declared count
    """
    tokens = text.split()
    if not tokens:
        raise EmptyInstanceError(instance)

    declared = _to_int(tokens[0], instance)
    values = [_to_int(tok, instance) for tok in tokens[1:]]

    if declared == 0:
        raise EmptyInstanceError(instance)
    if not values:
        raise EmptyInstanceError(instance, header_only=True)

    # a dangling x without its y still counts as a (broken) point
    found = (len(values) + 1) // 2
    if len(values) % 2 or found != declared:
        raise PointCountMismatchError(instance, declared, found)

    return list(zip(values[0::2], values[1::2]))


def validate_points(coordinates: List[Tuple[int, int]], instance=0):
    """
    Checks the input contract the separation core relies on:
    strictly positive coordinates, all x distinct, all y distinct.
    """
    for x, y in coordinates:
        if x <= 0 or y <= 0:
            raise InvalidPointsError(
                instance, f"Point ({x}, {y}) in file {instance} is not in the positive quadrant"
            )

    xs = [x for x, _ in coordinates]
    ys = [y for _, y in coordinates]
    if len(set(xs)) != len(xs):
        raise InvalidPointsError(instance, f"File {instance} has points sharing an x coordinate")
    if len(set(ys)) != len(ys):
        raise InvalidPointsError(instance, f"File {instance} has points sharing a y coordinate")


def read_instance_file(n: int, directory: str = None) -> List[Tuple[int, int]]:
    """
    Loads instance number `n` from `directory` (INSTANCE_FOLDER by default).

    Returns:
        list of (x, y) integer pairs, in file order
    """
    params = get_active_params()
    if directory is None:
        directory = params["INSTANCE_FOLDER"]

    path = os.path.join(directory, instance_filename(n))
    if not os.path.isfile(path):
        raise InstanceNotFoundError(n, path)

    try:
        with open(path, encoding="utf-8") as inst:
            text = inst.read()
    except UnicodeDecodeError as err:
        raise InstanceFormatError(n, err.object[err.start:err.end], "undecodable bytes") from err

    coordinates = parse_instance(text, instance=n)

    if params["VALIDATE_POINTS"]:
        validate_points(coordinates, instance=n)

    return coordinates


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  SOLUTION WRITING
# -------------------------------------------------------------------------

def format_solution(lines) -> str:
    """
    Serializes committed lines; the first row is the line count.
    """
    rows = [f"{len(lines)}"]
    for ln in lines:
        rows.append(f"{ln.axis.marker} {ln.intercept:f}")
    return "\n".join(rows) + "\n"


def write_solution(path: str, lines):
    """
    Save a solution to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    with open(path, "w") as out:
        out.write(format_solution(lines))
