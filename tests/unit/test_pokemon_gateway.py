from unittest.mock import AsyncMock

import pytest

from app.clients.pokeapi_client import ClientError, ClientErrorKind, ClientResult, PokeAPIClient
from app.gateways.pokemon_gateway import PokeAPIPokemonGateway, RawPokemonEnvelope, to_pokemon
from app.models import PokeEnvelope, Pokemon
from app.ports import UnsupportedOperationError

BULBASAUR = {"name": "bulbasaur", "url": "https://pokeapi.co/api/v2/pokemon/1/"}
IVYSAUR = {"name": "ivysaur", "url": "https://pokeapi.co/api/v2/pokemon/2/"}


def envelope(*items):
    return RawPokemonEnvelope(count=1302, results=list(items))


@pytest.fixture
def mock_client():
    # Use AsyncMock for methods that are awaited
    client = AsyncMock()
    client.get.return_value = ClientResult.success(envelope(BULBASAUR, IVYSAUR))
    return client


@pytest.fixture
def gateway(mock_client):
    return PokeAPIPokemonGateway(client=mock_client, base_url="https://pokeapi.co/api/v2")


# --- URL BUILDING ---

@pytest.mark.asyncio
async def test_list_url_carries_limit_and_offset(gateway, mock_client):
    await gateway.fetch_pokemon_list(5, 10)

    mock_client.get.assert_called_once_with(
        "https://pokeapi.co/api/v2/pokemon?limit=5&offset=10",
        RawPokemonEnvelope,
    )


@pytest.mark.asyncio
async def test_out_of_range_values_are_forwarded_verbatim(gateway, mock_client):
    await gateway.fetch_pokemon_list(-1, 0)

    mock_client.get.assert_called_once_with(
        "https://pokeapi.co/api/v2/pokemon?limit=-1&offset=0",
        RawPokemonEnvelope,
    )


@pytest.mark.asyncio
async def test_trailing_slash_on_base_url_is_ignored(mock_client):
    gateway = PokeAPIPokemonGateway(client=mock_client, base_url="http://localhost:9000/api/v2/")

    await gateway.fetch_pokemon_list(20, 0)

    assert mock_client.get.call_args.args[0] == "http://localhost:9000/api/v2/pokemon?limit=20&offset=0"


# --- MAPPING ---

@pytest.mark.asyncio
async def test_items_are_mapped_in_upstream_order(gateway):
    result = await gateway.fetch_pokemon_list(2, 0)

    assert result == [
        Pokemon(name="bulbasaur", url="https://pokeapi.co/api/v2/pokemon/1/"),
        Pokemon(name="ivysaur", url="https://pokeapi.co/api/v2/pokemon/2/"),
    ]


@pytest.mark.asyncio
async def test_absent_items_map_to_none(gateway, mock_client):
    mock_client.get.return_value = ClientResult.success(envelope(None, BULBASAUR))

    result = await gateway.fetch_pokemon_list(2, 0)

    assert result == [None, Pokemon(**BULBASAUR)]


def test_missing_name_defaults_to_empty_string():
    assert to_pokemon({"url": "https://pokeapi.co/api/v2/pokemon/1/"}) == Pokemon(
        name="", url="https://pokeapi.co/api/v2/pokemon/1/"
    )


def test_wrong_typed_fields_default_to_empty_string():
    assert to_pokemon({"name": 42, "url": None}) == Pokemon(name="", url="")


def test_extra_keys_are_ignored():
    assert to_pokemon({**BULBASAUR, "id": 1}) == Pokemon(**BULBASAUR)


# --- FAILURES ---

@pytest.mark.asyncio
@pytest.mark.parametrize("kind", list(ClientErrorKind))
async def test_client_failure_yields_empty_list(gateway, mock_client, kind):
    mock_client.get.return_value = ClientResult.failure(ClientError(kind=kind, detail="boom"))

    result = await gateway.fetch_pokemon_list(20, 0)

    assert result == []


@pytest.mark.asyncio
async def test_malformed_item_discards_the_whole_page(httpx_mock):
    """An item that is neither an object nor null fails the envelope decode."""
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon?limit=3&offset=0",
        json={"count": 3, "results": [BULBASAUR, "not-a-pokemon", IVYSAUR]},
    )
    gateway = PokeAPIPokemonGateway(client=PokeAPIClient())

    result = await gateway.fetch_pokemon_list(3, 0)

    assert result == []


@pytest.mark.asyncio
async def test_fetch_by_id_is_explicitly_unsupported(gateway, mock_client):
    with pytest.raises(UnsupportedOperationError) as excinfo:
        await gateway.fetch_pokemon_by_id(1)

    assert excinfo.value.operation == "fetch_pokemon_by_id"
    mock_client.get.assert_not_called()


def test_raw_envelope_accepts_null_items():
    parsed = RawPokemonEnvelope.model_validate({"results": [None, BULBASAUR]})

    assert parsed.results == [None, BULBASAUR]
    assert isinstance(parsed, PokeEnvelope)
