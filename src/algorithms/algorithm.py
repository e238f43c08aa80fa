from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, List, MutableSequence, Optional, Sequence

Comparator = Callable[[Any, Any], int]


class InvalidArgumentError(ValueError):
    """Raised when a sequence, target or comparator is missing or unusable."""


@dataclass
class SortResult:
    """
    Result of a sort operation.

    Attributes:
        comparisons: Number of comparator calls performed
        moves: Number of swaps (or element writes for merge-based sorts)
        time_taken: Time taken for the sort in seconds
        additional_info: Any additional algorithm-specific information
    """

    comparisons: int
    moves: int
    time_taken: float
    additional_info: Optional[dict] = None


@dataclass
class SearchResult:
    """
    Result of a search operation.

    Attributes:
        found: Whether the target was found
        index: Index of the target if found, -1 otherwise
        comparisons: Number of comparisons performed
        time_taken: Time taken for the search in seconds
        additional_info: Any additional algorithm-specific information
    """

    found: bool
    index: int
    comparisons: int
    time_taken: float
    additional_info: Optional[dict] = None


class Algorithm(ABC):
    """
    Abstract base class for instrumented algorithms.

    Subclasses describe themselves through static labels (name and
    complexity) that are used for reporting only; nothing here is computed
    from a run. Instances keep no state between calls, every run returns its
    own result object.
    """

    @abstractmethod
    def get_algorithm_name(self) -> str:
        """
        Get the name of the algorithm.

        Returns:
            A string representing the algorithm name
        """
        pass

    @abstractmethod
    def get_time_complexity(self) -> str:
        """Descriptive time complexity label, e.g. "O(n log n)"."""
        pass

    @abstractmethod
    def get_space_complexity(self) -> str:
        """Descriptive space complexity label, e.g. "O(1)"."""
        pass

    def get_characteristics(self) -> List[str]:
        """Short strengths/weaknesses lines used by the console report."""
        return []

    def validate_sequence(self, sequence: Optional[Sequence]) -> None:
        if sequence is None:
            raise InvalidArgumentError("Sequence cannot be None")

    def validate_comparator(self, comparator: Optional[Comparator]) -> None:
        if comparator is None:
            raise InvalidArgumentError("Comparator cannot be None")
        if not callable(comparator):
            raise InvalidArgumentError("Comparator must be callable")

    def __str__(self) -> str:
        """String representation of the algorithm."""
        return f"{self.get_algorithm_name()}"


class SortAlgorithm(Algorithm):
    """
    Base class for in-place sorting strategies.

    Implementations sort ``sequence`` into non-decreasing order under
    ``comparator`` and report comparisons, moves and elapsed time.
    """

    @abstractmethod
    def sort(
        self, sequence: Optional[MutableSequence], comparator: Optional[Comparator]
    ) -> SortResult:
        """
        Sort the sequence in place.

        Args:
            sequence: Mutable, indexable sequence owned by the caller
            comparator: Total-order function returning <0, 0 or >0

        Returns:
            A SortResult with the metrics of this run

        Raises:
            InvalidArgumentError: If sequence or comparator is absent
        """
        pass

    def is_stable(self) -> bool:
        """Whether comparator-equal elements keep their input order."""
        return False

    def validate_inputs(
        self, sequence: Optional[MutableSequence], comparator: Optional[Comparator]
    ) -> None:
        self.validate_sequence(sequence)
        self.validate_comparator(comparator)


class SearchAlgorithm(Algorithm):
    """Base class for search strategies. Searches never mutate the sequence."""

    @abstractmethod
    def search_index(
        self,
        sequence: Optional[Sequence],
        target: Any,
        comparator: Optional[Comparator],
    ) -> SearchResult:
        """
        Locate ``target`` in ``sequence``.

        Args:
            sequence: Indexable sequence to search
            target: Element to look for
            comparator: Total-order function returning <0, 0 or >0

        Returns:
            A SearchResult; ``index`` is -1 when the target is absent

        Raises:
            InvalidArgumentError: If any argument is absent
        """
        pass

    @abstractmethod
    def requires_sorted_list(self) -> bool:
        """Whether the sequence must already be sorted by the same comparator."""
        pass

    def validate_inputs(
        self, sequence: Optional[Sequence], target: Any, comparator: Optional[Comparator]
    ) -> None:
        self.validate_sequence(sequence)
        if target is None:
            raise InvalidArgumentError("Target cannot be None")
        self.validate_comparator(comparator)
