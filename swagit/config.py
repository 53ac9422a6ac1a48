"""Configuration handling for swagit"""

from dataclasses import dataclass, field
from typing import List

DEFAULT_PROTECTED_BRANCHES = ["main", "master"]


@dataclass
class Config:
    """Configuration for swagit with validation."""

    # Remote used for tracking refs and default branch resolution
    remote_name: str = "origin"

    # Branches the merge sweep never deletes
    protected_branches: List[str] = field(default_factory=lambda: list(DEFAULT_PROTECTED_BRANCHES))

    # Execution modes
    interactive: bool = True
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_remote_name()
        self._validate_protected_branches()

    def _validate_remote_name(self):
        """Validate remote_name is not empty."""
        if not self.remote_name or not self.remote_name.strip():
            raise ValueError("remote_name cannot be empty")
        self.remote_name = self.remote_name.strip()

    def _validate_protected_branches(self):
        """Validate protected_branches list."""
        if not isinstance(self.protected_branches, list):
            raise ValueError("protected_branches must be a list")

        # main and master are always protected, whatever the default branch is
        for name in DEFAULT_PROTECTED_BRANCHES:
            if name not in self.protected_branches:
                self.protected_branches.append(name)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "remote_name": self.remote_name,
            "protected_branches": self.protected_branches,
            "interactive": self.interactive,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "remote_name",
            "protected_branches",
            "interactive",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
