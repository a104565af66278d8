from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable
from urllib.parse import quote

import requests

from .errors import LookupFailure

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://rest.genenames.org/search/symbol/"
DEFAULT_TIMEOUT = 10.0
STATUS_SUCCESS = 0


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class RegistryResponse:
    """Parsed answer of one registry search.

    Fields:
    - status: registry status code (0 means success)
    - num_found: total number of matches reported by the registry
    - symbols: matched symbols, in registry response order
    """
    status: int
    num_found: int
    symbols: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == STATUS_SUCCESS


# PUBLIC_INTERFACE
@runtime_checkable
class SymbolRegistry(Protocol):
    """Symbol lookups needed by the puzzle core.

    Implementations raise LookupFailure for transport errors, non-2xx HTTP
    answers and malformed payloads. A non-zero registry status is returned in
    the RegistryResponse for the caller to judge.
    """

    def prefix(self, text: str) -> RegistryResponse: ...

    def suffix(self, text: str) -> RegistryResponse: ...

    def exact(self, text: str) -> RegistryResponse: ...


def parse_response(payload: Any) -> RegistryResponse:
    """Turn a genenames.org JSON payload into a RegistryResponse.

    Raises:
        LookupFailure: if the payload does not have the expected shape.
    """
    try:
        status = int(payload["responseHeader"]["status"])
        body = payload["response"]
        num_found = int(body["numFound"])
        symbols = [str(doc["symbol"]) for doc in body["docs"]]
    except (KeyError, TypeError, ValueError) as e:
        raise LookupFailure(f"Malformed registry payload: {e!r}") from e
    return RegistryResponse(status=status, num_found=num_found, symbols=symbols)


# PUBLIC_INTERFACE
class GeneNamesClient:
    """HTTP client for the genenames.org symbol search endpoint.

    Example:
        client = GeneNamesClient()
        client.prefix("MIB")   # GET .../search/symbol/MIB*
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout
        self.session = session or requests.Session()

    def prefix(self, text: str) -> RegistryResponse:
        return self.search(f"{text}*")

    def suffix(self, text: str) -> RegistryResponse:
        return self.search(f"*{text}")

    def exact(self, text: str) -> RegistryResponse:
        return self.search(text)

    # PUBLIC_INTERFACE
    def search(self, query: str) -> RegistryResponse:
        """Run one search query (``X*``, ``*X`` or ``X``) against the registry."""
        url = self.base_url + quote(query, safe="*")
        try:
            resp = self.session.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            payload: Dict[str, Any] = resp.json()
        except requests.RequestException as e:
            logger.warning("Registry query %r failed: %s", query, e)
            raise LookupFailure(f"Unable to query genenames.org: {e}") from e
        except ValueError as e:
            logger.warning("Registry query %r returned invalid JSON", query)
            raise LookupFailure("Unable to decode genenames.org response") from e
        return parse_response(payload)
