"""Application factories for repository access."""

from finwise.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
