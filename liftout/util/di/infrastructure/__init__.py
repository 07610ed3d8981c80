"""Infrastructure providers."""

# Bases
from .email import EmailProvider
from .persistence import PersistenceProvider

# Implementations, imported so get_provider() sees them as subclasses
from .email import ProdEmailProvider  # noqa: F401
from .persistence import InMemoryPersistenceProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "EmailProvider",
    "InMemoryPersistenceProvider",
    "PersistenceProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
]
