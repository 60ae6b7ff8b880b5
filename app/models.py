from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


# Domain record for a user row (Internal Contract)
class User(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    username: str = Field(min_length=1)
    password: str
    enabled: bool = True
    created_at: datetime
    updated_at: datetime


# Public projection of a user: the password hash never leaves the service
class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    enabled: bool
    created_at: datetime
    updated_at: datetime


class Pokemon(BaseModel):
    """
    A Pokemon as listed by the upstream API, e.g.
    {"name": "bulbasaur", "url": "https://pokeapi.co/api/v2/pokemon/1/"}
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    url: str = ""


class PokeEnvelope(BaseModel, Generic[T]):
    """
    Paginated wrapper returned by the upstream list endpoints:

        {
          "count": 1302,
          "next": "https://pokeapi.co/api/v2/pokemon?offset=20&limit=20",
          "previous": null,
          "results": [{"name": "bulbasaur", "url": "..."}, ...]
        }

    The next/previous cursors are kept but never followed.
    """

    count: int = 0
    next: Optional[str] = None
    previous: Optional[str] = None
    results: list[T] = Field(default_factory=list)
