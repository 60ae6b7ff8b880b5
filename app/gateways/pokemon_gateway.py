import logging
from typing import Any, Mapping, Optional

from app.clients.pokeapi_client import PokeAPIClient
from app.models import PokeEnvelope, Pokemon
from app.ports import PokemonGateway, UnsupportedOperationError

logger = logging.getLogger(__name__)

# Raw upstream items: a JSON object per Pokemon, or null
RawPokemonEnvelope = PokeEnvelope[Optional[dict[str, Any]]]


def to_pokemon(raw: Optional[Mapping[str, Any]]) -> Optional[Pokemon]:
    """Maps one raw upstream item, defaulting missing or non-string fields to ""."""
    if raw is None:
        return None
    name = raw.get("name")
    url = raw.get("url")
    return Pokemon(
        name=name if isinstance(name, str) else "",
        url=url if isinstance(url, str) else "",
    )


class PokeAPIPokemonGateway(PokemonGateway):
    LIST_URL = "{base_url}/pokemon?limit={limit}&offset={offset}"

    # Client is handed in by the composition root (app.dependencies)
    def __init__(self, client: PokeAPIClient, base_url: str = "https://pokeapi.co/api/v2"):
        self._client = client
        self._base_url = base_url.rstrip("/")

    async def fetch_pokemon_list(self, limit: int, offset: int) -> list[Optional[Pokemon]]:
        # limit/offset are forwarded as-is; the upstream API decides what they mean
        url = self.LIST_URL.format(base_url=self._base_url, limit=limit, offset=offset)
        result = await self._client.get(url, RawPokemonEnvelope)

        if not result.ok:
            logger.warning(
                f"Pokemon list unavailable (limit={limit}, offset={offset}): "
                f"{result.error.kind.value}, returning an empty page"
            )
            return []

        return [to_pokemon(item) for item in result.value.results]

    async def fetch_pokemon_by_id(self, pokemon_id: int) -> Pokemon:
        raise UnsupportedOperationError("fetch_pokemon_by_id")
