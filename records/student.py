import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

MIN_MARK = 0.0
MEDIUM_THRESHOLD = 5.0
GOOD_THRESHOLD = 6.5
VERY_GOOD_THRESHOLD = 7.5
EXCELLENT_THRESHOLD = 9.0
MAX_MARK = 10.0

MIN_ID_LENGTH = 2
MAX_ID_LENGTH = 20
MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 100

_ID_PATTERN = re.compile(r"^[A-Za-z0-9]+$")
_NAME_PATTERN = re.compile(r"^[A-Za-z\s]+$")


class StudentRank(Enum):
    """
    Performance rank derived from a mark.

    [0.0 - 5.0)  | Fail
    [5.0 - 6.5)  | Medium
    [6.5 - 7.5)  | Good
    [7.5 - 9.0)  | Very Good
    [9.0 - 10.0] | Excellent
    """

    FAIL = ("Fail", MIN_MARK, MEDIUM_THRESHOLD)
    MEDIUM = ("Medium", MEDIUM_THRESHOLD, GOOD_THRESHOLD)
    GOOD = ("Good", GOOD_THRESHOLD, VERY_GOOD_THRESHOLD)
    VERY_GOOD = ("Very Good", VERY_GOOD_THRESHOLD, EXCELLENT_THRESHOLD)
    EXCELLENT = ("Excellent", EXCELLENT_THRESHOLD, MAX_MARK)

    def __init__(self, display_name: str, min_mark: float, max_mark: float):
        self.display_name = display_name
        self.min_mark = min_mark
        self.max_mark = max_mark

    @classmethod
    def from_mark(cls, mark: float) -> "StudentRank":
        """Classify a mark, raising ValueError outside [0.0, 10.0]."""
        if isinstance(mark, float) and math.isnan(mark):
            raise ValueError("Mark cannot be NaN")
        if mark < MIN_MARK or mark > MAX_MARK:
            raise ValueError(f"Mark must be between {MIN_MARK} and {MAX_MARK}")

        for rank in (cls.FAIL, cls.MEDIUM, cls.GOOD, cls.VERY_GOOD):
            if mark < rank.max_mark:
                return rank
        return cls.EXCELLENT

    @property
    def ordinal(self) -> int:
        """Position in the rank ordering, Fail first."""
        return list(StudentRank).index(self)

    @property
    def mark_range(self) -> str:
        if self is StudentRank.EXCELLENT:
            return f"[{self.min_mark:.1f} - {self.max_mark:.1f}]"
        return f"[{self.min_mark:.1f} - {self.max_mark:.1f})"

    def __str__(self) -> str:
        return self.display_name


def validate_id(student_id: str) -> str:
    """Return the stripped id or raise ValueError."""
    if student_id is None:
        raise ValueError("Student ID cannot be None")
    student_id = student_id.strip()
    if not student_id:
        raise ValueError("Student ID cannot be empty")
    if len(student_id) < MIN_ID_LENGTH:
        raise ValueError(f"Student ID must be at least {MIN_ID_LENGTH} characters")
    if len(student_id) > MAX_ID_LENGTH:
        raise ValueError(f"Student ID cannot exceed {MAX_ID_LENGTH} characters")
    if not _ID_PATTERN.match(student_id):
        raise ValueError("Student ID must contain only letters and numbers")
    return student_id


def validate_name(name: str) -> str:
    """Return the stripped name or raise ValueError."""
    if name is None:
        raise ValueError("Student name cannot be None")
    name = name.strip()
    if not name:
        raise ValueError("Student name cannot be empty")
    if len(name) < MIN_NAME_LENGTH:
        raise ValueError(f"Student name must be at least {MIN_NAME_LENGTH} characters")
    if len(name) > MAX_NAME_LENGTH:
        raise ValueError(f"Student name cannot exceed {MAX_NAME_LENGTH} characters")
    if not _NAME_PATTERN.match(name):
        raise ValueError("Student name must contain only letters and spaces")
    return name


def validate_mark(mark: Union[int, float]) -> float:
    if mark is None:
        raise ValueError("Mark cannot be None")
    mark = float(mark)
    if math.isnan(mark):
        raise ValueError("Mark cannot be NaN")
    if math.isinf(mark):
        raise ValueError("Mark cannot be infinite")
    if mark < MIN_MARK:
        raise ValueError(f"Mark cannot be less than {MIN_MARK:.1f}")
    if mark > MAX_MARK:
        raise ValueError(f"Mark cannot be greater than {MAX_MARK:.1f}")
    return mark


@dataclass(eq=False, frozen=True)
class Student:
    """
    A student record. Identity is the id alone.

    Attributes:
        id: Unique identifier (letters and digits)
        name: Display name
        mark: Mark in [0.0, 10.0]
        rank: Derived from mark, never set directly

    Records are immutable; an update builds a new Student.
    """

    id: str
    name: str
    mark: float
    rank: StudentRank = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "id", validate_id(self.id))
        object.__setattr__(self, "name", validate_name(self.name))
        object.__setattr__(self, "mark", validate_mark(self.mark))
        object.__setattr__(self, "rank", StudentRank.from_mark(self.mark))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
