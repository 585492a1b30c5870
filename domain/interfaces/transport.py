"""Transport interface consumed by the repositories."""
from abc import ABC, abstractmethod
from typing import Any


class Transport(ABC):
    """Performs a GET and decodes the JSON body.

    Credentials and proxy routing are the implementation's concern. Failures
    are raised as ``domain.errors.FetchError`` subclasses: ``HttpError``
    (with the status and body) for non-2xx responses, ``TransientNetwork``
    for timeouts and connection failures.
    """

    @abstractmethod
    async def get_json(self, url: str, *, endpoint: str = "default") -> Any:
        """GET ``url``; ``endpoint`` names the rate-limit family it belongs to."""
        pass
