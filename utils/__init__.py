"""
Utility Functions

Provides the error types, instance/solution file I/O, and the geometric
checks used to verify a separation.
"""

from .errors import (
    SeparationError,
    InstanceError,
    InstanceNotFoundError,
    PointCountMismatchError,
    EmptyInstanceError,
    InstanceFormatError,
    InvalidPointsError,
    CapacityExceededError,
    IntegrityError,
)
from .geometry import midpoint, separating_line, unseparated_pairs, is_valid_separation
from .instance_io import (
    instance_filename,
    solution_filename,
    parse_instance,
    validate_points,
    read_instance_file,
    ensure_output_dir,
    format_solution,
    write_solution,
)

__all__ = [
    "SeparationError",
    "InstanceError",
    "InstanceNotFoundError",
    "PointCountMismatchError",
    "EmptyInstanceError",
    "InstanceFormatError",
    "InvalidPointsError",
    "CapacityExceededError",
    "IntegrityError",
    "midpoint",
    "separating_line",
    "unseparated_pairs",
    "is_valid_separation",
    "instance_filename",
    "solution_filename",
    "parse_instance",
    "validate_points",
    "read_instance_file",
    "ensure_output_dir",
    "format_solution",
    "write_solution",
]
