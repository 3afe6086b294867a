"""Error taxonomy for the library domain.

The orchestrator turns these into ``False``/``None`` results at its boundary.
Only ``UnknownUserKindError`` escapes to callers, since it signals a
programming error rather than a rejected request.
"""


class LibraryError(Exception):
    """Base class for library domain errors"""


class DuplicateKeyError(LibraryError):
    """A user id or ISBN is already registered"""


class NotFoundError(LibraryError):
    """User, book or transaction lookup miss"""


class BookUnavailableError(LibraryError):
    """No copy of the book is currently available"""


class LoanLimitExceededError(LibraryError):
    """User already holds the maximum number of active loans"""


class AlreadyReturnedError(LibraryError):
    """Loan has already been closed"""


class UnknownUserKindError(LibraryError, ValueError):
    """Factory discriminator matches no user kind"""
