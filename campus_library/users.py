"""
Library users.

Design Patterns & Strategies Used:
1. Tagged variant - one User type carrying a UserKind and a kind-specific profile
2. Dispatch table - lending policy resolved per kind from LOAN_POLICIES
3. Factory Pattern - UserFactory builds users from a discriminator
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Union

from .errors import UnknownUserKindError


class UserKind(Enum):
    STUDENT = "student"
    TEACHER = "teacher"


@dataclass(frozen=True)
class LoanPolicy:
    """Lending limits for one kind of user"""
    max_loan_duration_days: int
    max_books_allowed: int


LOAN_POLICIES: Dict[UserKind, LoanPolicy] = {
    UserKind.STUDENT: LoanPolicy(max_loan_duration_days=14, max_books_allowed=5),
    UserKind.TEACHER: LoanPolicy(max_loan_duration_days=28, max_books_allowed=10),
}


@dataclass(frozen=True)
class StudentProfile:
    student_number: str
    major: str


@dataclass(frozen=True)
class TeacherProfile:
    employee_number: str
    department: str


Profile = Union[StudentProfile, TeacherProfile]


@dataclass
class User:
    """Registered library user"""
    user_id: str
    name: str
    email: str
    phone: str
    kind: UserKind
    profile: Profile
    registration_date: datetime = field(default_factory=datetime.now)
    _active_loan_ids: List[str] = field(default_factory=list, init=False, repr=False)

    @property
    def active_loan_ids(self) -> List[str]:
        return list(self._active_loan_ids)

    @property
    def student_number(self) -> Optional[str]:
        return getattr(self.profile, 'student_number', None)

    @property
    def major(self) -> Optional[str]:
        return getattr(self.profile, 'major', None)

    @property
    def employee_number(self) -> Optional[str]:
        return getattr(self.profile, 'employee_number', None)

    @property
    def department(self) -> Optional[str]:
        return getattr(self.profile, 'department', None)

    def add_loan(self, transaction_id: str) -> None:
        if transaction_id not in self._active_loan_ids:
            self._active_loan_ids.append(transaction_id)

    def remove_loan(self, transaction_id: str) -> None:
        if transaction_id in self._active_loan_ids:
            self._active_loan_ids.remove(transaction_id)

    # Looked up on every call so eligibility always reflects the current table
    def max_loan_duration_days(self) -> int:
        return LOAN_POLICIES[self.kind].max_loan_duration_days

    def max_books_allowed(self) -> int:
        return LOAN_POLICIES[self.kind].max_books_allowed

    def can_borrow(self) -> bool:
        """Check if user can borrow more books"""
        return len(self._active_loan_ids) < self.max_books_allowed()

    def __str__(self):
        if self.kind == UserKind.STUDENT:
            return (f"Student(id={self.user_id}, name={self.name}, "
                    f"number={self.student_number}, major={self.major})")
        return (f"Teacher(id={self.user_id}, name={self.name}, "
                f"employee={self.employee_number}, department={self.department})")


class UserFactory:
    """Factory for creating users of each kind"""

    @staticmethod
    def create(kind: Union[UserKind, str], user_id: str, name: str, email: str,
               phone: str, registration_date: Optional[datetime] = None,
               **extra) -> User:
        """Create a user of the given kind.

        ``extra`` carries the kind-specific fields: ``student_number`` and
        ``major`` for students, ``employee_number`` and ``department`` for
        teachers. Missing fields are left as None. ``registration_date``
        defaults to now.
        """
        try:
            kind = UserKind(kind)
        except ValueError:
            raise UnknownUserKindError(f"Unknown user kind: {kind}") from None

        if kind == UserKind.STUDENT:
            profile = StudentProfile(student_number=extra.get('student_number'),
                                     major=extra.get('major'))
        else:
            profile = TeacherProfile(employee_number=extra.get('employee_number'),
                                     department=extra.get('department'))

        return User(user_id=user_id, name=name, email=email, phone=phone,
                    kind=kind, profile=profile,
                    registration_date=registration_date or datetime.now())

    @staticmethod
    def create_student(user_id: str, name: str, email: str, phone: str,
                       student_number: str, major: str,
                       registration_date: Optional[datetime] = None) -> User:
        return UserFactory.create(UserKind.STUDENT, user_id, name, email, phone,
                                  registration_date=registration_date,
                                  student_number=student_number, major=major)

    @staticmethod
    def create_teacher(user_id: str, name: str, email: str, phone: str,
                       employee_number: str, department: str,
                       registration_date: Optional[datetime] = None) -> User:
        return UserFactory.create(UserKind.TEACHER, user_id, name, email, phone,
                                  registration_date=registration_date,
                                  employee_number=employee_number, department=department)
