"""Local git access."""

from gjira.git.adapter import GitAdapter, RepositoryStatus

__all__ = ["GitAdapter", "RepositoryStatus"]
