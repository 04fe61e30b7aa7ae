from typing import Any, Dict, List, Optional

from ..core.options import ListOptions
from ..core.response import Response
from .base import Service


class ProjectService(Service):

    def list(self, options: Optional[ListOptions] = None) -> List[Dict[str, Any]]:
        return self._list("projects", "projects", options)

    def get(self, project_id: str) -> Dict[str, Any]:
        return self._fetch("GET", f"projects/{project_id}")

    def create(self, name: str, **fields: Any) -> Dict[str, Any]:
        return self._fetch("POST", "projects", {"name": name, **fields})

    def update(self, project_id: str, **fields: Any) -> Dict[str, Any]:
        return self._fetch("PATCH", f"projects/{project_id}", fields)

    def delete(self, project_id: str) -> Response:
        return self._delete(f"projects/{project_id}")
