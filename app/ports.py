"""
Ports: the capabilities the service needs from the outside world.

Routes depend on these interfaces only; the concrete adapters (SQL
repository, PokeAPI gateway) are built in app.dependencies and handed in
explicitly.
"""

from abc import ABC, abstractmethod

from app.models import Pokemon, User


class UnsupportedOperationError(Exception):
    """Raised by an adapter for a port operation it does not provide."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Operation '{operation}' is not supported by this adapter.")


class UserRepository(ABC):
    @abstractmethod
    def find_all(self) -> list[User]:
        """Return every user in the store, in table order."""


class PokemonGateway(ABC):
    @abstractmethod
    async def fetch_pokemon_list(self, limit: int, offset: int) -> list[Pokemon | None]:
        """
        Fetch one page of Pokemon from the upstream API.

        Entries may be None when the upstream item itself was absent. An
        upstream failure yields an empty list, never an exception.
        """

    @abstractmethod
    async def fetch_pokemon_by_id(self, pokemon_id: int) -> Pokemon:
        """Fetch a single Pokemon, or raise UnsupportedOperationError."""
