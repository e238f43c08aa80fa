from typing import List, Optional

from .student import Student, StudentRank


class InMemoryStudentRepository:
    """
    List-backed student store with unique ids.

    Time Complexity:
        insert/remove/update/find/exists: O(n) - linear scan on id
        find_all/find_by_rank: O(n) - returns a new list
        size/is_empty/clear: O(1)
    """

    def __init__(self):
        self._students: List[Student] = []

    def insert(self, student: Student) -> bool:
        """Add a student. Returns False if the id is already taken."""
        if student is None:
            raise ValueError("Student cannot be None")
        if self.exists(student.id):
            return False
        self._students.append(student)
        return True

    def remove(self, student_id: str) -> bool:
        self._validate_student_id(student_id)
        for i, student in enumerate(self._students):
            if student.id == student_id:
                del self._students[i]
                return True
        return False

    def update(self, student: Student) -> bool:
        """Replace the stored student with the same id."""
        if student is None:
            raise ValueError("Student cannot be None")
        for i, existing in enumerate(self._students):
            if existing.id == student.id:
                self._students[i] = student
                return True
        return False

    def find(self, student_id: str) -> Optional[Student]:
        self._validate_student_id(student_id)
        for student in self._students:
            if student.id == student_id:
                return student
        return None

    def find_all(self) -> List[Student]:
        """Copy of all students in insertion order."""
        return list(self._students)

    def find_by_rank(self, rank: StudentRank) -> List[Student]:
        if rank is None:
            raise ValueError("Rank cannot be None")
        return [student for student in self._students if student.rank is rank]

    def exists(self, student_id: str) -> bool:
        return self.find(student_id) is not None

    def size(self) -> int:
        return len(self._students)

    def is_empty(self) -> bool:
        return not self._students

    def clear(self) -> None:
        self._students.clear()

    def __len__(self) -> int:
        return self.size()

    @staticmethod
    def _validate_student_id(student_id: str) -> None:
        if student_id is None or not student_id.strip():
            raise ValueError("Student ID cannot be None or empty")
