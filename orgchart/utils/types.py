"""Shared type definitions for the org chart analysis."""

from dataclasses import dataclass
from enum import StrEnum

type EmployeeID = str
type SalaryAmount = float
type ReportingLevel = int
type ValidationOutcome = dict[str, bool | str | list[str]]


class ViolationKind(StrEnum):
    EMPTY_INPUT = "EmptyInput"
    DUPLICATE_ID = "DuplicateId"
    NO_ROOT = "NoRoot"
    MULTIPLE_ROOTS = "MultipleRoots"
    ORPHAN_REFERENCE = "OrphanReference"
    CIRCULAR_REFERENCE = "CircularReference"
    UNROOTED_SUMMARY = "UnrootedSummary"
    INVALID_INPUT_FILE = "InvalidInputFile"
    MALFORMED_RECORDS = "MalformedRecords"


class PayClassification(StrEnum):
    FAIR = "fair"
    UNDERPAID = "underpaid"
    OVERPAID = "overpaid"


@dataclass(frozen=True)
class AnalysisError:
    """A deterministic, non-retryable failure of one analysis stage."""

    kind: ViolationKind
    message: str
    employee_id: EmployeeID | None = None

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


def classify_pay_ratio(ratio: float, underpaid_ratio: float, overpaid_ratio: float) -> PayClassification:
    # Both band edges count as fair.
    match ratio:
        case r if r < underpaid_ratio:
            return PayClassification.UNDERPAID
        case r if r > overpaid_ratio:
            return PayClassification.OVERPAID
        case _:
            return PayClassification.FAIR
