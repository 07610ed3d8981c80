"""User entity."""

from datetime import datetime

from pydantic import Field

from liftout.domain.model.common import DomainModel, utcnow
from liftout.domain.value import EmailAddress, UserId, UserType


class User(DomainModel):
    """A person with an account.

    Accounts are created by the sign-in service; this API reads them and
    flips ``user_type`` to company when a company invitation is accepted.
    """

    id: UserId
    email: EmailAddress
    first_name: str | None = None
    last_name: str | None = None
    user_type: UserType = UserType.INDIVIDUAL
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def display_name(self) -> str:
        """Full name, falling back to the email address."""
        name = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return name or self.email.root
