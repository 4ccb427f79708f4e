"""
Hull Error Taxonomy
===================

Exceptions raised by the hull algorithms.

Hierarchy:
    HullError
    ├── InvalidInputError   (also a ValueError)
    └── DegenerateInputError
"""


class HullError(Exception):
    """Base class for every error raised by hullkit"""
    pass


class InvalidInputError(HullError, ValueError):
    """Raised when the point set is empty or holds malformed coordinates"""
    pass


class DegenerateInputError(HullError):
    """Raised when gift wrapping exceeds its iteration bound without closing the hull"""
    pass
