"""
Library System
==============

Core Design: Orchestrator that owns users, books and loans.

Design Patterns & Strategies Used:
1. Factory Pattern - Users are built through UserFactory
2. Observer Pattern - Overdue and reminder notifications via NotificationManager
3. Dependency Injection - Clock, id generator and notification manager are
   passed in rather than read from globals

Features:
- Student and teacher registration
- Book catalog with copy counts
- Borrowing with per-kind loan limits and durations
- Returns with late detection
- Overdue checks and due-soon reminders
- Statistics
"""

import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from threading import RLock
from typing import Callable, Dict, List, Optional, Tuple

from .books import Book
from .config import LibraryConfig
from .errors import (
    AlreadyReturnedError, BookUnavailableError, DuplicateKeyError,
    LibraryError, LoanLimitExceededError, NotFoundError,
)
from .loans import LoanTransaction, TransactionIdGenerator
from .notifications import NotificationManager, UserObserver
from .users import User, UserFactory, UserKind

logger = logging.getLogger(__name__)

SEARCH_FIELDS = ("title", "author", "isbn")


@dataclass
class LibraryStatistics:
    """Aggregate counters for reporting"""
    total_users: int
    students: int
    teachers: int
    total_copies: int
    available_copies: int
    copies_on_loan: int
    active_loans: int
    overdue_loans: int

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


class LibrarySystem:
    """Main library service"""

    def __init__(self, config: Optional[LibraryConfig] = None,
                 clock: Callable[[], datetime] = datetime.now,
                 notifications: Optional[NotificationManager] = None,
                 id_generator: Optional[TransactionIdGenerator] = None):
        self.config = config if config is not None else LibraryConfig()
        self.clock = clock
        self.notifications = notifications if notifications is not None else NotificationManager()
        self.id_generator = id_generator if id_generator is not None else TransactionIdGenerator(
            prefix=self.config.transaction_prefix,
            width=self.config.transaction_id_width,
        )
        self.users: Dict[str, User] = {}
        self.books: Dict[str, Book] = {}
        self.transactions: Dict[str, LoanTransaction] = {}
        self._lock = RLock()

    # ==================== USERS ====================

    def add_student(self, user_id: str, name: str, email: str, phone: str,
                    student_number: str, major: str) -> bool:
        """Register a student"""
        return self._register(UserFactory.create_student(
            user_id, name, email, phone, student_number, major,
            registration_date=self.clock()))

    def add_teacher(self, user_id: str, name: str, email: str, phone: str,
                    employee_number: str, department: str) -> bool:
        """Register a teacher"""
        return self._register(UserFactory.create_teacher(
            user_id, name, email, phone, employee_number, department,
            registration_date=self.clock()))

    def _register(self, user: User) -> bool:
        with self._lock:
            try:
                self._ensure_absent(self.users, user.user_id, "User")
            except DuplicateKeyError as e:
                logger.warning("Registration refused: %s", e)
                return False
            self.users[user.user_id] = user
            self.notifications.subscribe(UserObserver(user.user_id, user.email, clock=self.clock))
        logger.info("%s %s (ID: %s) registered", user.kind.value.capitalize(), user.name, user.user_id)
        return True

    @staticmethod
    def _ensure_absent(registry: Dict, key: str, label: str) -> None:
        if key in registry:
            raise DuplicateKeyError(f"{label} {key} already exists")

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def list_users(self) -> List[User]:
        with self._lock:
            return list(self.users.values())

    # ==================== CATALOG ====================

    def add_book(self, isbn: str, title: str, author: str, publisher: str,
                 publication_year: int, copies: int = 1) -> bool:
        """Add book to catalog"""
        with self._lock:
            try:
                self._ensure_absent(self.books, isbn, "Book with ISBN")
            except DuplicateKeyError as e:
                logger.warning("Book not added: %s", e)
                return False
            self.books[isbn] = Book(
                isbn=isbn,
                title=title,
                author=author,
                publisher=publisher,
                publication_year=publication_year,
                total_copies=copies,
                available_copies=copies,
                date_added=self.clock(),
            )
        logger.info("Book '%s' (%d copies) added", title, copies)
        return True

    def increase_copies(self, isbn: str, count: int) -> bool:
        with self._lock:
            book = self.books.get(isbn)
            if book is None:
                logger.warning("Book with ISBN %s not found", isbn)
                return False
            book.add_copies(count)
        logger.info("%d copies added for '%s'", count, book.title)
        return True

    def get_book(self, isbn: str) -> Optional[Book]:
        return self.books.get(isbn)

    def list_books(self, available_only: bool = False) -> List[Book]:
        with self._lock:
            books = list(self.books.values())
        if available_only:
            return [book for book in books if book.is_available]
        return books

    def search_books(self, field: str, value: str) -> List[Book]:
        """Case-insensitive substring search on title, author or isbn"""
        field = field.lower()
        if field not in SEARCH_FIELDS:
            return []
        value_lower = value.lower()
        with self._lock:
            return [book for book in self.books.values()
                    if value_lower in getattr(book, field).lower()]

    # ==================== LOANS ====================

    def check_borrow(self, user_id: str, isbn: str) -> Tuple[User, Book]:
        """Raise the error that would make a borrow fail, else return the pair"""
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        book = self.books.get(isbn)
        if book is None:
            raise NotFoundError(f"Book with ISBN {isbn} not found")
        if not book.is_available:
            raise BookUnavailableError(f"Book '{book.title}' is not available")
        if not user.can_borrow():
            raise LoanLimitExceededError(
                f"{user.name} has reached the loan limit ({user.max_books_allowed()})")
        return user, book

    def borrow_book(self, user_id: str, isbn: str) -> Optional[str]:
        """Borrow book, returning the new transaction id"""
        with self._lock:
            try:
                user, book = self.check_borrow(user_id, isbn)
            except LibraryError as e:
                logger.warning("Borrow refused: %s", e)
                return None

            transaction = LoanTransaction.open(
                transaction_id=self.id_generator.next_id(),
                user_id=user_id,
                book_title=book.title,
                isbn=isbn,
                duration_days=user.max_loan_duration_days(),
                clock=self.clock,
            )
            book.borrow()
            self.transactions[transaction.transaction_id] = transaction
            user.add_loan(transaction.transaction_id)

        logger.info("%s borrowed '%s' until %s", user.name, book.title,
                    transaction.due_date.strftime("%Y-%m-%d"))
        return transaction.transaction_id

    def return_book(self, transaction_id: str) -> bool:
        """Return book; a late return is reported but still succeeds"""
        with self._lock:
            try:
                transaction = self._open_transaction(transaction_id)
            except LibraryError as e:
                logger.warning("Return refused: %s", e)
                return False

            transaction.mark_returned()
            self.books[transaction.isbn].give_back()
            user = self.users.get(transaction.user_id)
            if user is not None:
                user.remove_loan(transaction_id)

        if transaction.was_returned_late():
            logger.warning("'%s' returned %d day(s) late", transaction.book_title,
                           transaction.days_late_at_return())
        else:
            logger.info("'%s' returned", transaction.book_title)
        return True

    def _open_transaction(self, transaction_id: str) -> LoanTransaction:
        transaction = self.transactions.get(transaction_id)
        if transaction is None:
            raise NotFoundError(f"Transaction {transaction_id} not found")
        if transaction.is_returned:
            raise AlreadyReturnedError(f"Transaction {transaction_id} already returned")
        if transaction.isbn not in self.books:
            raise NotFoundError(f"Book with ISBN {transaction.isbn} not found")
        return transaction

    def get_transaction(self, transaction_id: str) -> Optional[LoanTransaction]:
        return self.transactions.get(transaction_id)

    def list_active_loans(self, user_id: Optional[str] = None) -> List[LoanTransaction]:
        with self._lock:
            loans = [t for t in self.transactions.values() if not t.is_returned]
        if user_id is not None:
            loans = [t for t in loans if t.user_id == user_id]
        return loans

    # ==================== MAINTENANCE ====================

    def check_overdue(self) -> List[LoanTransaction]:
        """Collect late loans and notify their borrowers, on every call"""
        overdue = []
        with self._lock:
            for transaction in self.transactions.values():
                if transaction.is_late() and not transaction.is_returned:
                    overdue.append(transaction)
                    self.notifications.notify_overdue(
                        transaction.user_id, transaction.book_title, transaction.days_late())
        return overdue

    def send_reminders(self) -> List[LoanTransaction]:
        """Remind borrowers of loans due within the reminder window"""
        reminded = []
        with self._lock:
            for transaction in self.transactions.values():
                if transaction.is_returned:
                    continue
                days_remaining = transaction.days_remaining()
                if self.config.in_reminder_window(days_remaining):
                    reminded.append(transaction)
                    self.notifications.notify_reminder(
                        transaction.user_id, transaction.book_title, days_remaining)
        return reminded

    # ==================== REPORTING ====================

    def statistics(self) -> LibraryStatistics:
        with self._lock:
            users = self.users.values()
            total_copies = sum(book.total_copies for book in self.books.values())
            available_copies = sum(book.available_copies for book in self.books.values())
            return LibraryStatistics(
                total_users=len(self.users),
                students=sum(1 for user in users if user.kind == UserKind.STUDENT),
                teachers=sum(1 for user in users if user.kind == UserKind.TEACHER),
                total_copies=total_copies,
                available_copies=available_copies,
                copies_on_loan=total_copies - available_copies,
                active_loans=len(self.list_active_loans()),
                overdue_loans=len(self.check_overdue()),
            )

    def __str__(self):
        return (f"LibrarySystem(users={len(self.users)}, books={len(self.books)}, "
                f"transactions={len(self.transactions)})")
