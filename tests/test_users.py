from datetime import datetime

import pytest

from campus_library import UnknownUserKindError, UserFactory, UserKind


def test_factory_creates_student_with_policy():
    student = UserFactory.create_student("ETU999", "Jean Test", "jean@test.example",
                                         "0600000000", "12345678", "Computer Science")
    assert student.kind == UserKind.STUDENT
    assert student.user_id == "ETU999"
    assert student.student_number == "12345678"
    assert student.major == "Computer Science"
    assert student.employee_number is None
    assert student.max_loan_duration_days() == 14
    assert student.max_books_allowed() == 5


def test_factory_creates_teacher_with_policy():
    teacher = UserFactory.create_teacher("PROF999", "Marie Test", "marie@test.example",
                                         "0611111111", "EMP99999", "Mathematics")
    assert teacher.kind == UserKind.TEACHER
    assert teacher.department == "Mathematics"
    assert teacher.max_loan_duration_days() == 28
    assert teacher.max_books_allowed() == 10


def test_factory_accepts_string_kind():
    user = UserFactory.create("teacher", "PROF1", "T", "t@x.example", "0",
                              employee_number="E1", department="Physics")
    assert user.kind == UserKind.TEACHER
    assert user.employee_number == "E1"


def test_factory_rejects_unknown_kind():
    with pytest.raises(UnknownUserKindError):
        UserFactory.create("librarian", "LIB1", "L", "l@x.example", "0")


def test_loan_ids_are_deduplicated_and_removable():
    user = UserFactory.create_student("ETU1", "A", "a@x.example", "0", "1", "CS")
    user.add_loan("TRX000001")
    user.add_loan("TRX000001")
    user.add_loan("TRX000002")
    assert user.active_loan_ids == ["TRX000001", "TRX000002"]

    user.remove_loan("TRX000001")
    user.remove_loan("TRX999999")
    assert user.active_loan_ids == ["TRX000002"]


def test_active_loan_ids_returns_copy():
    user = UserFactory.create_student("ETU1", "A", "a@x.example", "0", "1", "CS")
    user.active_loan_ids.append("TRX000001")
    assert user.active_loan_ids == []


def test_can_borrow_tracks_limit():
    user = UserFactory.create_student("ETU1", "A", "a@x.example", "0", "1", "CS")
    for i in range(5):
        assert user.can_borrow()
        user.add_loan(f"TRX{i:06d}")
    assert not user.can_borrow()


def test_factory_uses_given_registration_date():
    registered = datetime(2024, 3, 1, 9, 0, 0)
    student = UserFactory.create_student("ETU1", "A", "a@x.example", "0", "1", "CS",
                                         registration_date=registered)
    teacher = UserFactory.create_teacher("PROF1", "T", "t@x.example", "0", "E1", "Physics",
                                         registration_date=registered)
    assert student.registration_date == registered
    assert teacher.registration_date == registered


def test_factory_builds_student_from_string_kind():
    user = UserFactory.create("student", "ETU1", "A", "a@x.example", "0",
                              student_number="1", major="CS")
    assert user.kind == UserKind.STUDENT
    assert user.major == "CS"
