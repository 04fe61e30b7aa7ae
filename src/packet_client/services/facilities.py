from typing import Any, Dict, List, Optional

from ..core.options import ListOptions
from .base import Service


class FacilityService(Service):

    def list(self, options: Optional[ListOptions] = None) -> List[Dict[str, Any]]:
        return self._list("facilities", "facilities", options)
