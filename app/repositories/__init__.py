"""Adapters implementing UserRepository."""
from .user_repository import SqlUserRepository

__all__ = [
    'SqlUserRepository',
]
