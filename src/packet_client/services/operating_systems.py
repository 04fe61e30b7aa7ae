from typing import Any, Dict, List

from .base import Service


class OSService(Service):

    def list(self) -> List[Dict[str, Any]]:
        return self._list("operating-systems", "operating_systems")
