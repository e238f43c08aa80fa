"""
Comparator builders for student records.

A comparator is a function ``(a, b) -> int`` returning a negative number,
zero or a positive number, the same convention ``functools.cmp_to_key``
expects. Descending order is the ascending comparator with its result
negated.
"""

from typing import Any, Callable, Dict

from src.algorithms.algorithm import Comparator

from .student import Student

STUDENT_FIELDS = ("id", "name", "mark", "rank")


def natural_order(a: Any, b: Any) -> int:
    """Compare two values with their own ordering."""
    return (a > b) - (a < b)


def reverse(comparator: Comparator) -> Comparator:
    """Negate a comparator."""

    def reversed_comparator(a: Any, b: Any) -> int:
        return -comparator(a, b)

    return reversed_comparator


def comparing(key: Callable[[Any], Any]) -> Comparator:
    """Build a comparator from a key extractor."""

    def key_comparator(a: Any, b: Any) -> int:
        return natural_order(key(a), key(b))

    return key_comparator


_FIELD_KEYS: Dict[str, Callable[[Student], Any]] = {
    "id": lambda student: student.id,
    "name": lambda student: student.name,
    "mark": lambda student: student.mark,
    "rank": lambda student: student.rank.ordinal,
}


def by_field(field: str, ascending: bool = True) -> Comparator:
    """
    Comparator on one student field.

    Args:
        field: One of "id", "name", "mark", "rank"
        ascending: False negates the comparator

    Raises:
        ValueError: If the field is unknown
    """
    if field not in _FIELD_KEYS:
        raise ValueError(
            f"Unknown field: {field} (expected one of {', '.join(STUDENT_FIELDS)})"
        )

    comparator = comparing(_FIELD_KEYS[field])
    return comparator if ascending else reverse(comparator)
