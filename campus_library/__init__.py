"""In-memory university library: users, books, loans and notifications."""

from .books import Book
from .config import LibraryConfig, configure_logging
from .errors import (
    AlreadyReturnedError, BookUnavailableError, DuplicateKeyError, LibraryError,
    LoanLimitExceededError, NotFoundError, UnknownUserKindError,
)
from .loans import LoanStatus, LoanTransaction, TransactionIdGenerator
from .notifications import NotificationManager, Observer, UserObserver
from .system import LibraryStatistics, LibrarySystem
from .users import LOAN_POLICIES, LoanPolicy, User, UserFactory, UserKind

__version__ = "1.0.0"
