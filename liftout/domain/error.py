"""Domain layer errors.

Each error that reaches the API carries the HTTP status it maps to; the
interface layer turns them into ``{"error": message}`` bodies.
"""


class DomainError(Exception):
    """Base domain error."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Domain validation error."""

    status_code = 400


class NotAuthenticatedError(DomainError):
    """Raised when an operation needs a signed-in user and there is none."""

    status_code = 401

    def __init__(
        self, message: str = "Authentication required", redirect_to: str | None = None
    ):
        self.redirect_to = redirect_to
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when the caller is not allowed to act on a resource."""

    status_code = 403


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class InvitationNotFoundError(DomainError):
    """Raised for unknown, consumed, or declined invitation tokens.

    The message is identical in every case so callers cannot tell which.
    """

    status_code = 404

    def __init__(self):
        super().__init__("Invitation not found or already used")


class InvitationExpiredError(DomainError):
    """Raised when a pending invitation has passed its expiry."""

    status_code = 410

    def __init__(self):
        super().__init__("This invitation has expired")


class ConflictError(DomainError):
    """Raised when an operation would duplicate existing state."""

    status_code = 409


class DuplicateTokenError(DomainError):
    """Raised by repositories when a generated token already exists."""

    def __init__(self):
        super().__init__("Invitation token already exists")


class PendingInvitationExistsError(ConflictError):
    """Raised when the invitee already holds an outstanding invitation to the target."""

    def __init__(self):
        super().__init__("A pending invitation already exists for this email")
