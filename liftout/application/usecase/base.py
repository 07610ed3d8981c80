"""Base use case and shared request/response plumbing."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from liftout.domain.value import EmailAddress, UserId, UserType


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class CamelModel(BaseModel):
    """Model exchanged with the frontend, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Principal(BaseModel):
    """The authenticated caller, decoded from their session token."""

    model_config = ConfigDict(frozen=True)

    user_id: UserId
    email: EmailAddress | None = None
    user_type: UserType = UserType.INDIVIDUAL
