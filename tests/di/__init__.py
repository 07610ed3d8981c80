"""Mock providers for testing."""

from .email import MockEmailProvider
from .container import build_test_container, make_test_settings

__all__ = [
    "MockEmailProvider",
    "build_test_container",
    "make_test_settings",
]
