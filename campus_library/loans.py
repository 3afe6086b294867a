"""
Loan transactions.

A LoanTransaction records one user taking one copy of a book. It starts
ACTIVE and moves to RETURNED exactly once. All "now" computations go through
the transaction's clock so elapsed time can be simulated.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from itertools import count
from typing import Callable, Optional

SECONDS_PER_DAY = 24 * 60 * 60


class LoanStatus(Enum):
    ACTIVE = "ACTIVE"
    RETURNED = "RETURNED"


class TransactionIdGenerator:
    """Monotonic transaction id source, TRX000001, TRX000002, ..."""

    def __init__(self, prefix: str = "TRX", width: int = 6):
        self.prefix = prefix
        self.width = width
        self._counter = count(1)

    def next_id(self) -> str:
        return f"{self.prefix}{next(self._counter):0{self.width}d}"


def _days(delta: timedelta) -> float:
    return delta.total_seconds() / SECONDS_PER_DAY


@dataclass
class LoanTransaction:
    """Loan record"""
    transaction_id: str
    user_id: str
    book_title: str
    isbn: str
    loan_date: datetime
    due_date: datetime
    return_date: Optional[datetime] = None
    status: LoanStatus = LoanStatus.ACTIVE
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False, compare=False)

    @classmethod
    def open(cls, transaction_id: str, user_id: str, book_title: str, isbn: str,
             duration_days: int,
             clock: Callable[[], datetime] = datetime.now) -> "LoanTransaction":
        """Start a loan now, due ``duration_days`` calendar days later"""
        now = clock()
        return cls(
            transaction_id=transaction_id,
            user_id=user_id,
            book_title=book_title,
            isbn=isbn,
            loan_date=now,
            due_date=now + timedelta(days=duration_days),
            clock=clock,
        )

    @property
    def is_returned(self) -> bool:
        return self.status == LoanStatus.RETURNED

    def mark_returned(self) -> bool:
        """Close the loan; a second call fails and keeps the first return date"""
        if self.is_returned:
            return False
        self.return_date = self.clock()
        self.status = LoanStatus.RETURNED
        return True

    def is_late(self) -> bool:
        if self.is_returned:
            return False
        return self.clock() > self.due_date

    def days_late(self) -> int:
        if not self.is_late():
            return 0
        return math.ceil(_days(self.clock() - self.due_date))

    def days_remaining(self) -> int:
        """Whole days until the due date, negative once overdue"""
        if self.is_returned:
            return 0
        return math.floor(_days(self.due_date - self.clock()))

    def loan_duration_days(self) -> int:
        end = self.return_date if self.is_returned else self.clock()
        return math.floor(_days(end - self.loan_date))

    def was_returned_late(self) -> bool:
        return self.is_returned and self.return_date > self.due_date

    def days_late_at_return(self) -> int:
        if not self.was_returned_late():
            return 0
        return math.ceil(_days(self.return_date - self.due_date))

    def __str__(self):
        if self.is_returned:
            state = "Returned"
        elif self.is_late():
            state = "Late"
        else:
            state = "Active"
        return (f"LoanTransaction(id={self.transaction_id}, user={self.user_id}, "
                f"book='{self.book_title}', status={state})")
