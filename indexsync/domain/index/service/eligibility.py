"""Eligibility checks - whether a record should appear in search at all."""

from collections.abc import Callable

from indexsync.domain.record.model.record import Record

EligibilityCheck = Callable[[Record], bool]


def show_in_search(record: Record) -> bool:
    """Honour a show_in_search field when the record defines one."""
    if "show_in_search" in record.content:
        return bool(record.content["show_in_search"])
    return True


class EligibilityChecks:
    """Ordered list of predicates combined with logical AND.

    Evaluation short-circuits on the first predicate that rejects the record.
    A check registered with a record_type only applies to that type.
    """

    def __init__(self, checks: list[EligibilityCheck] | None = None) -> None:
        self._checks: list[tuple[str | None, EligibilityCheck]] = [
            (None, check) for check in (checks if checks is not None else [show_in_search])
        ]

    def register(self, check: EligibilityCheck, record_type: str | None = None) -> None:
        self._checks.append((record_type, check))

    def __len__(self) -> int:
        return len(self._checks)

    def __call__(self, record: Record) -> bool:
        return all(
            check(record)
            for record_type, check in self._checks
            if record_type is None or record_type == record.record_type
        )
