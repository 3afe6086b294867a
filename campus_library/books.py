"""
Book catalog entity.

A Book is one title with a number of loanable copies. Availability changes
only through borrow/give_back, which report failure through their boolean
result instead of raising.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class Book:
    """Book entity"""
    isbn: str
    title: str
    author: str
    publisher: str
    publication_year: int
    total_copies: int = 1
    available_copies: Optional[int] = None
    date_added: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if self.available_copies is None:
            self.available_copies = self.total_copies

    @property
    def is_available(self) -> bool:
        return self.available_copies > 0

    def borrow(self) -> bool:
        """Take one copy out"""
        if self.available_copies > 0:
            self.available_copies -= 1
            return True
        return False

    def give_back(self) -> bool:
        """Put one copy back"""
        if self.available_copies < self.total_copies:
            self.available_copies += 1
            return True
        return False

    def add_copies(self, count: int) -> None:
        """Add new copies to both the total and the available stock"""
        for _ in range(count):
            self.total_copies += 1
            self.available_copies += 1

    def availability_rate(self) -> float:
        """Share of copies on the shelf, 0.0 to 1.0"""
        if self.total_copies == 0:
            return 0.0
        return self.available_copies / self.total_copies

    def __str__(self):
        return (f"Book(isbn={self.isbn}, title='{self.title}', "
                f"author='{self.author}', available={self.is_available})")
