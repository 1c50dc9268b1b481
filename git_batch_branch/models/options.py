"""Request-scoped option values for filtering and deleting branches."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FilterOptions:
    """How to narrow a branch snapshot down.

    ``include_merged`` is tri-state: ``None`` applies no merge-based
    filtering, ``False`` drops merged branches and ``True`` keeps them.
    """
    keyword: Optional[str] = None
    regex: Optional[str] = None
    exclude: bool = False
    include_merged: Optional[bool] = None
    case_sensitive: bool = False


@dataclass(frozen=True)
class DeleteOptions:
    """How a batch deletion is carried out."""
    dry_run: bool = False
    force: bool = False  # git branch -D instead of -d
    verbose: bool = False
