"""Selection of the repository implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from walletsvc.memory_repo import DEFAULT_SEGMENT_COUNT, MemoryRepo, Repository
from walletsvc.sql_repo import DBConfig, SQLRepo


class RepoType(str, Enum):
    """Kinds of repository the service can run on."""

    MEMORY = "memory"
    MYSQL = "mysql"


@dataclass
class RepoFactory:
    """Builds repositories from the configured settings."""

    segment_count: int = DEFAULT_SEGMENT_COUNT
    db_config: DBConfig = field(default_factory=DBConfig)

    def get_repository(self, repo_type: RepoType | str) -> Repository:
        """Return a repository of ``repo_type``; raise ValueError for unknown kinds."""
        try:
            kind = RepoType(repo_type)
        except ValueError:
            raise ValueError(f"unknown repo type: {repo_type}") from None
        if kind is RepoType.MEMORY:
            return MemoryRepo(self.segment_count)
        return SQLRepo.from_config(self.db_config)