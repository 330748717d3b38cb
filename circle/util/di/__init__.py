"""Dependency injection module.

Providers are listed once in ``PROVIDERS``. A provider with subclasses is a
mockable component: production code picks the subclass with
``__is_mock__ = False``, tests may pick the mock registered under
``tests/di``.
"""

from typing import Type

from circle.util.di.application import ProdApplicationProvider
from circle.util.di.base import Component, ProviderBase
from circle.util.di.core import ProdConfigProvider
from circle.util.di.domain import ProdDomainProvider
from circle.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a PROVIDERS entry to the provider class to instantiate.

    Raises:
        ValueError: If a mockable component has no implementation of the
            requested kind
    """
    implementations = {
        getattr(cls, "__is_mock__", False): cls for cls in base.__subclasses__()
    }
    if not implementations:
        return base

    if use_mock not in implementations:
        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for "
            f"{getattr(base, '__mock_component__', None) or base.__name__}"
        )
    return implementations[use_mock]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
