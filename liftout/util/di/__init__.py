"""Dependency injection module."""

from typing import Type

from liftout.util.di.application import ProdApplicationProvider
from liftout.util.di.base import Component, ProviderBase
from liftout.util.di.core import ProdConfigProvider
from liftout.util.di.domain import ProdDomainProvider
from liftout.util.di.infrastructure import (
    EmailProvider,
    InMemoryPersistenceProvider,
    PersistenceProvider,
    ProdEmailProvider,
    ProdPersistenceProvider,
)
from liftout.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    # Concrete providers
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable components
    PersistenceProvider,
    EmailProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get the provider class to instantiate for a base.

    A base without subclasses is concrete and used as-is. Otherwise the
    subclass whose ``__is_mock__`` matches ``use_mock`` is picked.

    Args:
        base: Provider base class
        use_mock: Whether to pick the mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If no matching implementation exists
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )
    if impl is None:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", None) or base.__name__
        raise DependencyInjectionError(f"No {kind} implementation for {component_name}")
    return impl


__all__ = [
    "Component",
    "EmailProvider",
    "InMemoryPersistenceProvider",
    "PersistenceProvider",
    "PROVIDERS",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
