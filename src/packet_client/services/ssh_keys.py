from typing import Any, Dict, List, Optional

from ..core.options import ListOptions
from ..core.response import Response
from .base import Service


class SshKeyService(Service):

    def list(self, options: Optional[ListOptions] = None) -> List[Dict[str, Any]]:
        return self._list("ssh-keys", "ssh_keys", options)

    def get(self, key_id: str) -> Dict[str, Any]:
        return self._fetch("GET", f"ssh-keys/{key_id}")

    def create(self, label: str, key: str) -> Dict[str, Any]:
        return self._fetch("POST", "ssh-keys", {"label": label, "key": key})

    def update(self, key_id: str, **fields: Any) -> Dict[str, Any]:
        return self._fetch("PATCH", f"ssh-keys/{key_id}", fields)

    def delete(self, key_id: str) -> Response:
        return self._delete(f"ssh-keys/{key_id}")
