"""Adapters implementing PokemonGateway."""
from .pokemon_gateway import PokeAPIPokemonGateway, to_pokemon

__all__ = [
    'PokeAPIPokemonGateway',
    'to_pokemon',
]
