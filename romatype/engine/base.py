from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class OutcomeKind(str, Enum):
    reject = "reject"
    partial = "partial"
    complete = "complete"


@dataclass(frozen=True)
class MatchOutcome:
    """Result of testing a tentative buffer against one unit.

    ``partial`` carries the new buffer; ``complete`` carries how many target
    characters the unit spans and any typed characters left over for the next
    unit.
    """
    kind: OutcomeKind
    buffer: str = ""
    advance: int = 0
    leftover: str = ""

    @classmethod
    def reject(cls) -> 'MatchOutcome':
        return cls(OutcomeKind.reject)

    @classmethod
    def partial(cls, buffer: str) -> 'MatchOutcome':
        return cls(OutcomeKind.partial, buffer=buffer)

    @classmethod
    def complete(cls, advance: int, leftover: str = "") -> 'MatchOutcome':
        return cls(OutcomeKind.complete, advance=advance, leftover=leftover)


class SubmitResult(NamedTuple):
    accepted: bool
    unit_completed: bool
    sequence_completed: bool
