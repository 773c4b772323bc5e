"""
Exception types raised by the separation pipeline.

    SeparationError
    ├── InstanceError            bad input for one instance
    │   ├── InstanceNotFoundError
    │   ├── PointCountMismatchError
    │   ├── EmptyInstanceError
    │   ├── InstanceFormatError
    │   └── InvalidPointsError
    ├── CapacityExceededError    more points than MAX_POINTS
    └── IntegrityError           internal invariant broken, never recoverable
"""


class SeparationError(Exception):
    """Base class for every error raised by this package."""


# -------------------------------------------------------------------------
#  PER-INSTANCE INPUT ERRORS
# -------------------------------------------------------------------------

class InstanceError(SeparationError):
    """An instance file could not be turned into a valid point set."""

    def __init__(self, instance, message):
        self.instance = instance
        super().__init__(message)


class InstanceNotFoundError(InstanceError):
    def __init__(self, instance, path):
        self.path = path
        super().__init__(instance, f"No instance file [{instance}] found ({path})")


class PointCountMismatchError(InstanceError):
    def __init__(self, instance, declared, found):
        self.declared = declared
        self.found = found
        super().__init__(
            instance,
            f"The file {instance} has more|less points than it should "
            f"(declared {declared}, found {found})",
        )


class EmptyInstanceError(InstanceError):
    def __init__(self, instance, header_only=False):
        self.header_only = header_only
        message = f"There are no points in file {instance}"
        if header_only:
            message += "; only the header value was found"
        super().__init__(instance, message)


class InstanceFormatError(InstanceError):
    def __init__(self, instance, token, what="a non-integer value"):
        self.token = token
        super().__init__(instance, f"File {instance} contains {what}: {token!r}")


class InvalidPointsError(InstanceError):
    """Coordinates break the input contract (positive, distinct per axis)."""


# -------------------------------------------------------------------------
#  CONFIGURATION / INTERNAL ERRORS
# -------------------------------------------------------------------------

class CapacityExceededError(SeparationError):
    def __init__(self, count, capacity):
        self.count = count
        self.capacity = capacity
        super().__init__(
            f"{count} points exceed the configured capacity of {capacity} (MAX_POINTS)"
        )


class IntegrityError(SeparationError):
    """A modeling invariant failed. Processing must stop."""
