"""
Domain errors.

Every error is raised at the call that violates a precondition. They all
derive from ValueError so callers validating input can catch them generically.
"""


class HarmonyError(ValueError):
    """Base class for pitch and harmony errors."""


class OutOfRangeError(HarmonyError):
    """A pitch-class index outside 0-11."""


class EmptyIntervalListError(HarmonyError):
    """A custom scale built from no intervals."""


class InvalidIntervalError(HarmonyError):
    """A custom scale interval that is zero or negative."""


class InvalidInversionError(HarmonyError):
    """An inversion index that is negative or not smaller than the chord size."""


class IndexOutOfRangeError(HarmonyError):
    """A chord degree selection past the end of the underlying pitch set."""


class DegreeOutOfRangeError(HarmonyError):
    """A functional-harmony degree that cannot be resolved in its scale."""
