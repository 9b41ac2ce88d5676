"""Factories (Infrastructure Layer)."""
from covid_api.infrastructure.factories.repository_factory import RepositoryFactory, Repositories

__all__ = [
    "RepositoryFactory",
    "Repositories",
]
