"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from ImpsortUserError.

Programming errors and bugs should NOT inherit from ImpsortUserError;
they propagate with full tracebacks.
"""

from __future__ import annotations

from typing import Optional


class ImpsortUserError(Exception):
    """
    Base class for all user-facing errors in impsort.

    These errors indicate problems that the user can fix:
    configuration issues, unreadable files, etc.
    """
    pass


class ConfigurationError(ImpsortUserError):
    """
    Invalid group configuration.

    Raised once, while the configuration is loaded, never while
    declarations are being classified.
    """

    def __init__(self, message: str, *, group_index: Optional[int] = None, pattern: Optional[str] = None):
        self.group_index = group_index
        self.pattern = pattern
        prefix = f"groups[{group_index}]: " if group_index is not None else ""
        super().__init__(prefix + message)


__all__ = ["ImpsortUserError", "ConfigurationError"]
