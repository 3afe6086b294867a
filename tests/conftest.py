from datetime import datetime, timedelta

import pytest

from campus_library import LibrarySystem


class FakeClock:
    """Controllable replacement for datetime.now"""

    def __init__(self, start=datetime(2024, 3, 1, 9, 0, 0)):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def library(clock):
    return LibrarySystem(clock=clock)


@pytest.fixture
def stocked_library(library):
    library.add_student("ETU001", "Alice Dupont", "alice@univ.example", "0611111111", "21345678", "CS")
    library.add_student("ETU002", "Bob Martin", "bob@univ.example", "0622222222", "21445679", "Maths")
    library.add_teacher("PROF001", "Jean Moreau", "jean@univ.example", "0633333333", "EMP20001", "CS")
    library.add_book("ISBN-A", "Python Basics", "Guido Author", "Tech Press", 2020, 1)
    library.add_book("ISBN-B", "Data Structures", "Jane Smith", "Tech Press", 2019, 3)
    return library
