from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker

from app.clients import PokeAPIClient
from app.config import Settings, get_settings
from app.db import create_session_factory
from app.gateways import PokeAPIPokemonGateway
from app.ports import PokemonGateway, UserRepository
from app.repositories import SqlUserRepository

_session_factory = None
_poke_client = None

def get_session_factory() -> sessionmaker[Session]:
    global _session_factory
    if _session_factory is None:
        settings = get_settings()
        _session_factory = create_session_factory(settings.database_url, echo=settings.sql_echo)
    return _session_factory

def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client

async def close_clients() -> None:
    global _poke_client
    if _poke_client is not None:
        await _poke_client.close()
        _poke_client = None

def get_db() -> Generator[Session, None, None]:
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()

def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return SqlUserRepository(db)

def get_pokemon_gateway(
    poke_client: PokeAPIClient = Depends(get_poke_client),
    settings: Settings = Depends(get_settings),
) -> PokemonGateway:
    return PokeAPIPokemonGateway(client=poke_client, base_url=settings.pokeapi_base_url)
