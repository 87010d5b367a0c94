from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from fastapi import Request
from pydantic import BaseModel

if TYPE_CHECKING:
    from core.config import Config


class Principal(BaseModel):
    user_id: int
    authenticated: bool = False


class PrincipalProvider(ABC):
    @abstractmethod
    async def resolve(self, request: Request) -> Principal: ...


class PlaceholderPrincipalProvider(PrincipalProvider):
    """Resolves every request to the same fixed user.

    Stands in until bookings are tied to a verified identity token.
    """

    def __init__(self, user_id: int):
        self._principal = Principal(user_id=user_id, authenticated=False)

    async def resolve(self, request: Request) -> Principal:
        return self._principal


def get_principal_provider(config: "Config | None" = None) -> PrincipalProvider:
    """Provider for the configured identity source, currently the placeholder user."""
    from core.config import get_config

    config = config or get_config()
    return PlaceholderPrincipalProvider(user_id=config.placeholder_user_id)
