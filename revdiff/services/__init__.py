"""Services for revdiff.

Services encapsulate business logic and orchestrate domain models.
They receive dependencies via constructor injection.
"""

from revdiff.services.git_operations import (
    GitDiffError,
    GitObjectNotFoundError,
    GitOperationsService,
    GitRepositoryError,
)
from revdiff.services.diff import Diff, Lazy

__all__ = [
    "Diff",
    "GitDiffError",
    "GitObjectNotFoundError",
    "GitOperationsService",
    "GitRepositoryError",
    "Lazy",
]
