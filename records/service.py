from typing import Dict, List, Optional, Sequence, Tuple

from src.algorithms.algorithm import SearchAlgorithm, SearchResult, SortAlgorithm, SortResult
from src.algorithms.binary_search import BinarySearch
from src.algorithms.bubble_sort import BubbleSort
from src.algorithms.linear_search import LinearSearch
from src.algorithms.merge_sort import MergeSort
from src.algorithms.quick_sort import QuickSort
from src.benchmark.benchmark import BenchmarkRunner, ComparisonReport

from .comparators import by_field
from .repository import InMemoryStudentRepository
from .student import Student, StudentRank, validate_id, validate_mark, validate_name

# Stand-in name and mark used when benchmarking a search for an unknown id
PLACEHOLDER_NAME = "Test"
PLACEHOLDER_MARK = 5.0


class StudentService:
    """
    Business operations on student records.

    Coordinates the repository with the sort/search strategies. Every
    algorithm runs on a copy of the stored records, never on the
    repository's backing list.
    """

    def __init__(
        self,
        repository: Optional[InMemoryStudentRepository] = None,
        runner: Optional[BenchmarkRunner] = None,
    ):
        self.repository = repository if repository is not None else InMemoryStudentRepository()
        self.runner = runner or BenchmarkRunner()

    def add_student(self, student_id: str, name: str, mark: float) -> bool:
        """Returns False if a student with this id already exists."""
        if self.repository.exists(validate_id(student_id)):
            return False
        return self.repository.insert(Student(student_id, name, mark))

    def find_student_by_id(self, student_id: str) -> Optional[Student]:
        return self.repository.find(validate_id(student_id))

    def find_all_students(self) -> List[Student]:
        return self.repository.find_all()

    def find_students_by_rank(self, rank: StudentRank) -> List[Student]:
        return self.repository.find_by_rank(rank)

    def find_students_by_name(self, name_query: str) -> List[Student]:
        """Case-insensitive substring match on the name."""
        if name_query is None or not name_query.strip():
            raise ValueError("Name query cannot be None or empty")
        query = name_query.strip().lower()
        return [s for s in self.repository.find_all() if query in s.name.lower()]

    def update_student(self, student_id: str, name: str, mark: float) -> bool:
        if self.find_student_by_id(student_id) is None:
            return False
        return self.repository.update(Student(student_id, name, mark))

    def update_student_mark(self, student_id: str, mark: float) -> bool:
        student = self.find_student_by_id(student_id)
        if student is None:
            return False
        return self.repository.update(
            Student(student.id, student.name, validate_mark(mark))
        )

    def update_student_name(self, student_id: str, name: str) -> bool:
        student = self.find_student_by_id(student_id)
        if student is None:
            return False
        return self.repository.update(
            Student(student.id, validate_name(name), student.mark)
        )

    def delete_student(self, student_id: str) -> bool:
        return self.repository.remove(validate_id(student_id))

    def size(self) -> int:
        return self.repository.size()

    def is_empty(self) -> bool:
        return self.repository.is_empty()

    def sort_students(
        self, strategy: SortAlgorithm, field: str = "id", ascending: bool = True
    ) -> Tuple[List[Student], SortResult]:
        """
        Sort a copy of all students on one field.

        Returns:
            The sorted copy and the metrics of the sort
        """
        if strategy is None:
            raise ValueError("Sort strategy cannot be None")
        students = self.repository.find_all()
        result = strategy.sort(students, by_field(field, ascending))
        return students, result

    def search_student(
        self, strategy: SearchAlgorithm, student_id: str
    ) -> Tuple[Optional[Student], SearchResult]:
        """
        Look a student up by id with the given strategy.

        Strategies that need sorted input search a copy sorted by id.
        """
        if strategy is None:
            raise ValueError("Search strategy cannot be None")
        target = self._search_target(student_id)

        if strategy.requires_sorted_list():
            students, _ = self.sort_students(MergeSort(), "id")
        else:
            students = self.repository.find_all()

        result = strategy.search_index(students, target, by_field("id"))
        return (students[result.index] if result.found else None), result

    def calculate_average_mark(self) -> float:
        students = self.repository.find_all()
        if not students:
            return 0.0
        return sum(s.mark for s in students) / len(students)

    def get_highest_mark(self) -> float:
        return max((s.mark for s in self.repository.find_all()), default=0.0)

    def get_lowest_mark(self) -> float:
        return min((s.mark for s in self.repository.find_all()), default=0.0)

    def count_students_by_rank(self, rank: StudentRank) -> int:
        return len(self.repository.find_by_rank(rank))

    def rank_distribution(self) -> Dict[StudentRank, int]:
        return {rank: self.count_students_by_rank(rank) for rank in StudentRank}

    def compare_sorting(
        self,
        field: str = "mark",
        ascending: bool = False,
        strategies: Optional[Sequence[SortAlgorithm]] = None,
    ) -> ComparisonReport:
        """Benchmark sort strategies on all students (default: mark, descending)."""
        if strategies is None:
            strategies = [BubbleSort(), QuickSort(), MergeSort()]
        return self.runner.run_sort_benchmark(
            self.repository.find_all(), by_field(field, ascending), strategies
        )

    def compare_searching(
        self,
        student_id: str,
        strategies: Optional[Sequence[SearchAlgorithm]] = None,
        is_sorted: bool = True,
    ) -> ComparisonReport:
        """
        Benchmark search strategies for one id.

        With ``is_sorted`` the records are first sorted by id with Quick
        Sort, otherwise they are searched in insertion order. An unknown id
        is still searched, using a placeholder record.
        """
        if strategies is None:
            strategies = [LinearSearch(), BinarySearch()]
        target = self._search_target(student_id)
        if is_sorted:
            students, _ = self.sort_students(QuickSort(), "id")
        else:
            students = self.repository.find_all()
        return self.runner.run_search_benchmark(
            students, target, by_field("id"), strategies, is_sorted=is_sorted
        )

    def _search_target(self, student_id: str) -> Student:
        student = self.find_student_by_id(student_id)
        if student is None:
            student = Student(student_id, PLACEHOLDER_NAME, PLACEHOLDER_MARK)
        return student
