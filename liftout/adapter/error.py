"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class EmailDeliveryError(AdapterError):
    """Email provider rejected or failed a send."""

    pass
