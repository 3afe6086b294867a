from datetime import timedelta

from campus_library import LoanStatus, LoanTransaction, TransactionIdGenerator


def open_loan(clock, days=14):
    return LoanTransaction.open("TRX000001", "ETU001", "Python Basics", "ISBN-A",
                                duration_days=days, clock=clock)


def test_id_generator_is_monotonic_and_padded():
    generator = TransactionIdGenerator()
    ids = [generator.next_id() for _ in range(3)]
    assert ids == ["TRX000001", "TRX000002", "TRX000003"]


def test_separate_generators_do_not_share_sequence():
    first = TransactionIdGenerator()
    first.next_id()
    assert TransactionIdGenerator().next_id() == "TRX000001"


def test_open_sets_due_date_from_duration(clock):
    loan = open_loan(clock, days=28)
    assert loan.loan_date == clock.now
    assert loan.due_date == clock.now + timedelta(days=28)
    assert loan.status == LoanStatus.ACTIVE
    assert not loan.is_returned
    assert loan.return_date is None


def test_not_late_before_due_date(clock):
    loan = open_loan(clock)
    assert not loan.is_late()
    assert loan.days_late() == 0
    assert loan.days_remaining() == 14
    clock.advance(days=14)
    assert not loan.is_late()
    assert loan.days_late() == 0
    assert loan.days_remaining() == 0


def test_days_late_rounds_up(clock):
    loan = open_loan(clock)
    clock.advance(days=14, hours=1)
    assert loan.is_late()
    assert loan.days_late() == 1
    assert loan.days_remaining() == -1
    clock.advance(days=2)
    assert loan.days_late() == 3


def test_days_remaining_rounds_down(clock):
    loan = open_loan(clock)
    clock.advance(days=10, hours=12)
    assert loan.days_remaining() == 3


def test_mark_returned_only_once(clock):
    loan = open_loan(clock)
    clock.advance(days=3)
    assert loan.mark_returned() is True
    first_return = loan.return_date
    clock.advance(days=1)
    assert loan.mark_returned() is False
    assert loan.return_date == first_return
    assert loan.status == LoanStatus.RETURNED


def test_returned_loan_is_never_late(clock):
    loan = open_loan(clock)
    clock.advance(days=20)
    loan.mark_returned()
    assert not loan.is_late()
    assert loan.days_late() == 0
    assert loan.days_remaining() == 0


def test_loan_duration_uses_return_date(clock):
    loan = open_loan(clock)
    clock.advance(days=5, hours=6)
    assert loan.loan_duration_days() == 5
    loan.mark_returned()
    clock.advance(days=30)
    assert loan.loan_duration_days() == 5


def test_late_return_is_recorded(clock):
    loan = open_loan(clock)
    clock.advance(days=16, hours=2)
    loan.mark_returned()
    assert loan.was_returned_late()
    assert loan.days_late_at_return() == 3


def test_on_time_return_is_not_late(clock):
    loan = open_loan(clock)
    clock.advance(days=2)
    loan.mark_returned()
    assert not loan.was_returned_late()
    assert loan.days_late_at_return() == 0
