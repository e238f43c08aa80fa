import re
from typing import Iterator, Optional

from mimesis import Numeric, Person
from mimesis.locales import Locale

from .service import StudentService
from .student import MAX_MARK, MAX_NAME_LENGTH, MIN_MARK, MIN_NAME_LENGTH, Student

SAMPLE_STUDENTS = [
    ("S001", "Alice Johnson", 9.5),
    ("S002", "Fiona Green", 9.8),
    ("S003", "Laura Palmer", 9.2),
    ("S004", "Bob Smith", 8.2),
    ("S005", "George Wilson", 7.8),
    ("S006", "Julia Roberts", 8.9),
    ("S007", "Oscar Wilde", 8.5),
    ("S008", "Charlie Brown", 7.0),
    ("S009", "Diana Prince", 6.8),
    ("S010", "Kevin Hart", 7.2),
    ("S011", "Mike Ross", 6.5),
    ("S012", "Ethan Hunt", 6.2),
    ("S013", "Hannah Lee", 5.5),
    ("S014", "Nina Simone", 5.8),
    ("S015", "Ian Malcolm", 4.2),
]

_NOT_NAME_CHARS = re.compile(r"[^A-Za-z\s]")


def load_sample_students(service: StudentService) -> int:
    """Load the fixed demo set. Returns how many students were added."""
    added = 0
    for student_id, name, mark in SAMPLE_STUDENTS:
        if service.add_student(student_id, name, mark):
            added += 1
    return added


class StudentGenerator:
    """Generates valid random students using mimesis."""

    def __init__(self, locale: Locale = Locale.EN, seed: Optional[int] = None):
        self.person = Person(locale=locale, seed=seed)
        self.numeric = Numeric(seed=seed)
        self.counter = 0

    def generate_student(self) -> Student:
        """Generate a single student with the next sequential id."""
        self.counter += 1
        return Student(
            student_id_for(self.counter), self._generate_name(), self._generate_mark()
        )

    def generate_batch(self, count: int) -> Iterator[Student]:
        """Generate a batch of students."""
        for _ in range(count):
            yield self.generate_student()

    def _generate_name(self) -> str:
        # Names like "O'Neil" or "Smith-Jones" lose their punctuation
        while True:
            name = _NOT_NAME_CHARS.sub("", self.person.full_name()).strip()
            name = " ".join(name.split())[:MAX_NAME_LENGTH].strip()
            if len(name) >= MIN_NAME_LENGTH:
                return name

    def _generate_mark(self) -> float:
        return self.numeric.float_number(start=MIN_MARK, end=MAX_MARK, precision=1)


def student_id_for(n: int) -> str:
    return f"S{n:03d}"


def seed_students(service: StudentService, count: int, seed: Optional[int] = None) -> int:
    """Add ``count`` generated students. Returns how many were added."""
    generator = StudentGenerator(seed=seed)
    added = 0
    for student in generator.generate_batch(count):
        if service.repository.insert(student):
            added += 1
    return added
