"""Client modules for external API communication."""
from .pokeapi_client import ClientError, ClientErrorKind, ClientResult, PokeAPIClient

__all__ = [
    'ClientError',
    'ClientErrorKind',
    'ClientResult',
    'PokeAPIClient',
]
