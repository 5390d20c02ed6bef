"""HTTP transport for the Zendesk client.

APIWrapper never talks to the network directly. It hands every request to
a transport object exposing a single ``send`` method, so tests can swap in a
recorded-response double without touching the network.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests
from requests.exceptions import ConnectionError, RequestException, Timeout

from .errors import NetworkError
from .models import HTTPResponse

DEFAULT_TIMEOUT = 30

DEFAULT_HEADERS = {
    'Accept': 'application/json',
    'Content-Type': 'application/json',
}


class Transport(ABC):
    """Interface for sending one HTTP request and returning its response.

    Implementations must raise NetworkError when the server cannot be
    reached. Non-2xx responses are returned, not raised.
    """

    @abstractmethod
    def send(
        self,
        method: str,
        url: str,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> HTTPResponse:
        ...


class RequestsTransport(Transport):
    """Transport backed by the requests library.

    Uses Zendesk API-token authentication ("{email}/token" as the basic-auth
    user). Each call issues a standalone request, so one instance can be
    shared between threads.

    Example:
        >>> transport = RequestsTransport("agent@example.com", "abc123")
        >>> response = transport.send("GET", "https://acme.zendesk.com/api/v2/tickets/1")
    """

    def __init__(self, user: str, api_token: str, timeout: float = DEFAULT_TIMEOUT):
        self._auth = (f"{user}/token", api_token)
        self._timeout = timeout

    def send(
        self,
        method: str,
        url: str,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> HTTPResponse:
        """Send a request and return the raw response.

        Raises:
            NetworkError: On connection failures and timeouts
        """
        merged_headers = dict(DEFAULT_HEADERS)
        if headers:
            merged_headers.update(headers)

        try:
            response = requests.request(
                method,
                url,
                json=json,
                headers=merged_headers,
                auth=self._auth,
                timeout=timeout if timeout is not None else self._timeout,
            )
        except Timeout as e:
            raise NetworkError(endpoint=url, reason="request timed out") from e
        except ConnectionError as e:
            raise NetworkError(endpoint=url, reason="connection failed") from e
        except RequestException as e:
            raise NetworkError(endpoint=url, reason=type(e).__name__) from e

        return HTTPResponse(
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers),
        )
