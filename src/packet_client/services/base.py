"""Base class for resource service objects."""

from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

from ..core.destinations import JSONTarget
from ..core.options import ListOptions, with_query
from ..core.response import Response

if TYPE_CHECKING:
    from ..core.client import Client


def envelope(key: str) -> Callable[[Any], Any]:
    """Factory unwrapping a list envelope such as ``{"plans": [...]}``."""
    def unwrap(document: Any) -> Any:
        return document[key]
    return unwrap


class Service:
    """
    Resource-scoped facade over a Client.

    Holds a non-owning reference to the client and issues every call
    through ``client.new_request`` + ``client.do``.
    """

    def __init__(self, client: "Client"):
        self.client = client

    def _list(self, path: str, key: str, options: Optional[ListOptions] = None) -> Any:
        return self._fetch("GET", with_query(path, options), factory=envelope(key))

    def _fetch(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        factory: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        target = JSONTarget(factory)
        self.client.do(self.client.new_request(method, path, body), target)
        return target.value

    def _delete(self, path: str) -> Response:
        return self.client.do(self.client.new_request("DELETE", path))
