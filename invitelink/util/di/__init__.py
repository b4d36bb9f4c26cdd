"""Dependency injection wiring.

``PROVIDERS`` lists every provider base once. A base without subclasses is
used as-is; a base with subclasses is a mockable component whose production
or mock implementation is picked by ``get_provider``.
"""

from typing import Type

from invitelink.util.di.application import ProdApplicationProvider
from invitelink.util.di.base import Component, ProviderBase
from invitelink.util.di.core import ProdConfigProvider
from invitelink.util.di.domain import ProdDomainProvider
from invitelink.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider base to the class to instantiate.

    Raises:
        ValueError: If a mockable component lacks the requested implementation
    """
    implementations = {impl.__is_mock__: impl for impl in base.__subclasses__()}
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        component = base.__mock_component__ or base.__name__
        raise ValueError(f"No {kind} implementation for {component}") from None


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
