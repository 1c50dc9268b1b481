"""Result values produced by filtering and batch operations"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class FailureKind(Enum):
    """Why a single branch in a batch could not be processed."""
    INVALID_BRANCH_NAME = "invalid-branch-name"
    BRANCH_NOT_FOUND = "branch-not-found"
    PROTECTED_BRANCH = "protected-branch"
    DELETE_OPERATION_FAILED = "delete-operation-failed"


@dataclass(frozen=True)
class DeleteResult:
    """Outcome for one branch; ``error`` and ``failure`` are set iff it failed."""
    success: bool
    branch_name: str
    error: Optional[str] = None
    failure: Optional[FailureKind] = None

    @classmethod
    def ok(cls, branch_name: str) -> "DeleteResult":
        return cls(success=True, branch_name=branch_name)

    @classmethod
    def failed(cls, branch_name: str, failure: FailureKind, error: str) -> "DeleteResult":
        return cls(success=False, branch_name=branch_name, error=error, failure=failure)


@dataclass
class BatchDeleteResult:
    """Aggregate of a batch; ``results`` keeps the input name order."""
    total: int = 0
    success: int = 0
    failed: int = 0
    results: List[DeleteResult] = field(default_factory=list)
    dry_run: bool = False

    @classmethod
    def empty(cls, dry_run: bool = False) -> "BatchDeleteResult":
        return cls(dry_run=dry_run)

    @classmethod
    def from_results(cls, results: List[DeleteResult], dry_run: bool = False) -> "BatchDeleteResult":
        """Build the aggregate counts from per-branch outcomes."""
        succeeded = sum(1 for r in results if r.success)
        return cls(
            total=len(results),
            success=succeeded,
            failed=len(results) - succeeded,
            results=list(results),
            dry_run=dry_run,
        )

    @property
    def succeeded(self) -> List[DeleteResult]:
        return [r for r in self.results if r.success]

    @property
    def failures(self) -> List[DeleteResult]:
        return [r for r in self.results if not r.success]


@dataclass(frozen=True)
class FilterStats:
    """Counts over the whole snapshot plus the size of a filtered subset."""
    total: int
    filtered: int
    protected: int
    merged: int
    unmerged: int


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating filter options."""
    valid: bool
    error: Optional[str] = None
