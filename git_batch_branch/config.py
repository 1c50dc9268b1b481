"""Configuration handling for git-batch-branch"""

from dataclasses import dataclass, fields
from typing import Optional


@dataclass
class Config:
    """Configuration for git-batch-branch with validation."""

    # Repository
    repo_path: str = "."
    main_branch: Optional[str] = None  # None = auto-detect from the remote HEAD
    remote_name: str = "origin"

    # Execution modes
    interactive: bool = True
    dry_run: bool = False
    force: bool = False
    case_sensitive: bool = False

    # Verbosity
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_repo_path()
        self._validate_main_branch()
        self._validate_remote_name()

    def _validate_repo_path(self):
        """Validate repo_path is not empty."""
        if not self.repo_path or not str(self.repo_path).strip():
            raise ValueError("repo_path cannot be empty")
        self.repo_path = str(self.repo_path).strip()

    def _validate_main_branch(self):
        """Validate main_branch, when given, is not blank."""
        if self.main_branch is None:
            return
        if not self.main_branch.strip():
            raise ValueError("main_branch cannot be empty")
        self.main_branch = self.main_branch.strip()

    def _validate_remote_name(self):
        """Validate remote_name is not empty."""
        if not self.remote_name or not self.remote_name.strip():
            raise ValueError("remote_name cannot be empty")
        self.remote_name = self.remote_name.strip()

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
