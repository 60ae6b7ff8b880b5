import enum
import logging
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

import httpx
from pydantic import TypeAdapter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ClientErrorKind(str, enum.Enum):
    UNREACHABLE = "unreachable"  # network failure or timeout
    BAD_STATUS = "bad_status"  # non-2xx response
    MALFORMED = "malformed"  # body is not JSON or not the expected shape


@dataclass(frozen=True)
class ClientError:
    kind: ClientErrorKind
    detail: str
    status_code: Optional[int] = None


@dataclass(frozen=True)
class ClientResult(Generic[T]):
    """Outcome of a GET: either a decoded value or a categorized error."""

    value: Optional[T] = None
    error: Optional[ClientError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or(self, default: T) -> T:
        return self.value if self.error is None else default

    @classmethod
    def success(cls, value: T) -> "ClientResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ClientError) -> "ClientResult[T]":
        return cls(error=error)


class PokeAPIClient:
    """Thin GET wrapper around httpx; failures come back as values, never as exceptions."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        # Transport defaults apply (no custom timeout, no retries)
        self.client = client or httpx.AsyncClient()

    async def get(self, url: str, response_type: Any) -> ClientResult[Any]:
        """
        Performs a single GET on a fully formed URL and decodes the JSON body
        into `response_type` (anything pydantic's TypeAdapter accepts).
        """
        try:
            response = await self.client.get(url)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
            return ClientResult.success(TypeAdapter(response_type).validate_python(response.json()))

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"GET {url} failed with status {status_code}")
            return ClientResult.failure(
                ClientError(
                    kind=ClientErrorKind.BAD_STATUS,
                    detail=f"Upstream responded with status {status_code}",
                    status_code=status_code,
                )
            )

        except httpx.RequestError as e:
            # Handle network failures/timeouts
            logger.error(f"GET {url} network error: {e!r}")
            return ClientResult.failure(
                ClientError(kind=ClientErrorKind.UNREACHABLE, detail=f"Network error: {e}")
            )

        except ValueError as e:
            # JSON decode errors and pydantic ValidationError are both ValueErrors
            logger.error(f"GET {url} returned an unexpected response format: {e}")
            return ClientResult.failure(
                ClientError(kind=ClientErrorKind.MALFORMED, detail="Unexpected response format")
            )

    async def close(self):
        """Close the underlying HTTP connection pool (call on app shutdown)."""
        await self.client.aclose()
