"""Demonstration of the campus library system."""

from .config import LibraryConfig, configure_logging
from .system import LibraryStatistics, LibrarySystem


def print_report(stats: LibraryStatistics):
    print("=" * 60)
    print("LIBRARY REPORT")
    print("=" * 60)
    print(f"Total users: {stats.total_users}")
    print(f"  - Students: {stats.students}")
    print(f"  - Teachers: {stats.teachers}")
    print("Books:")
    print(f"  - Total copies: {stats.total_copies}")
    print(f"  - Available: {stats.available_copies}")
    print(f"  - On loan: {stats.copies_on_loan}")
    print("Loans:")
    print(f"  - Active: {stats.active_loans}")
    print(f"  - Overdue: {stats.overdue_loans}")
    print("=" * 60)


def main():
    config = LibraryConfig.from_env()
    configure_logging(config)

    print("=" * 60)
    print("CAMPUS LIBRARY DEMONSTRATION")
    print("=" * 60)
    print()

    library = LibrarySystem(config=config)
    print(f"System ready: {library}")
    print()

    print("1. Registering users:")
    library.add_student("ETU001", "Alice Dupont", "alice.dupont@univ.example", "06 12 34 56 78",
                        "21345678", "Computer Science")
    library.add_student("ETU002", "Bob Martin", "bob.martin@univ.example", "06 23 45 67 89",
                        "21445679", "Mathematics")
    library.add_teacher("PROF001", "Dr. Jean Moreau", "jean.moreau@univ.example", "06 45 67 89 01",
                        "EMP20001", "Computer Science")
    library.add_student("ETU001", "Alice Again", "alice2@univ.example", "06 00 00 00 00",
                        "0", "None")
    for user in library.list_users():
        print(f"  - {user}")
    print()

    print("2. Adding books:")
    library.add_book("978-2-253-08949-9", "The Lord of the Rings", "J.R.R. Tolkien", "Pocket", 2012, 3)
    library.add_book("978-2-253-04933-9", "1984", "George Orwell", "Gallimard", 2020, 1)
    library.add_book("978-2-8234-0356-3", "Python for Scientists", "Etienne Tignon", "Techniques", 2018, 4)
    library.increase_copies("978-2-253-04933-9", 1)
    for book in library.list_books():
        print(f"  - {book} ({book.available_copies}/{book.total_copies})")
    print()

    print("3. Searching books:")
    for book in library.search_books("author", "orwell"):
        print(f"  - {book.title} by {book.author}")
    print()

    print("4. Borrowing books:")
    loan1 = library.borrow_book("ETU001", "978-2-253-08949-9")
    loan2 = library.borrow_book("ETU002", "978-2-253-04933-9")
    library.borrow_book("PROF001", "978-2-253-04933-9")
    library.borrow_book("PROF001", "978-2-253-04933-9")
    library.borrow_book("UNKNOWN", "978-2-253-04933-9")
    for loan in library.list_active_loans():
        print(f"  - {loan} due {loan.due_date:%Y-%m-%d}")
    print()

    print("5. Returning books:")
    library.return_book(loan1)
    library.return_book(loan1)
    print()

    print("6. Notifications:")
    library.check_overdue()
    library.send_reminders()
    for entry in library.notifications.history() or ["(none)"]:
        print(f"  - {entry}")
    print(f"  Active loans for ETU002: {[t.transaction_id for t in library.list_active_loans('ETU002')]}")
    print(f"  Last loan: {library.get_transaction(loan2)}")
    print()

    print_report(library.statistics())


if __name__ == "__main__":
    main()
