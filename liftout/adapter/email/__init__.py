"""Email adapter."""

from .client import NOT_CONFIGURED, MockEmailClient, ResendEmailClient

__all__ = ["NOT_CONFIGURED", "MockEmailClient", "ResendEmailClient"]
