from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse

from app import dependencies
from app.config import get_settings
from app.db import init_database
from app.dependencies import get_pokemon_gateway, get_user_repository
from app.logging_config import configure_logging
from app.models import Pokemon, UserResponse
from app.ports import PokemonGateway, UnsupportedOperationError, UserRepository


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    log = configure_logging(settings.log_level)
    init_database(dependencies.get_session_factory(), seed=settings.seed_database)
    log.info("Service started")
    yield
    await dependencies.close_clients()


app = FastAPI(
    title="Hexagonal Pokedex API",
    description="Users from a relational store and Pokemon relayed from PokeAPI, wired as ports and adapters.",
    lifespan=lifespan,
)


@app.exception_handler(UnsupportedOperationError)
async def unsupported_operation_handler(request: Request, exc: UnsupportedOperationError):
    return JSONResponse(
        status_code=status.HTTP_501_NOT_IMPLEMENTED,
        content={"detail": str(exc)},
    )


@app.get(
    "/api/v1/users",
    response_model=list[UserResponse],
    summary="Lists every user",
)
def list_users(users: UserRepository = Depends(get_user_repository)):
    """Returns all users in table order. Password hashes are not serialized."""
    # Database errors are not caught here; FastAPI answers them with a 500
    return users.find_all()


@app.get(
    "/api/v1/pokemon",
    response_model=list[Pokemon],
    summary="Lists one page of Pokemon from PokeAPI",
)
async def list_pokemon(
    limit: int = 20,
    offset: int = 0,
    gateway: PokemonGateway = Depends(get_pokemon_gateway),
):
    """Relays a single upstream page; an unavailable upstream yields an empty list."""
    pokemon = await gateway.fetch_pokemon_list(limit, offset)
    return [p for p in pokemon if p is not None]


@app.get(
    "/api/v1/pokemon/{pokemon_id}",
    response_model=Pokemon,
    summary="Returns a single Pokemon (not supported yet, answers 501)",
)
async def get_pokemon(
    pokemon_id: int,
    gateway: PokemonGateway = Depends(get_pokemon_gateway),
):
    return await gateway.fetch_pokemon_by_id(pokemon_id)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8080)
