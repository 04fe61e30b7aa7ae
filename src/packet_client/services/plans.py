from typing import Any, Dict, List, Optional

from ..core.options import ListOptions
from .base import Service


class PlanService(Service):
    """Hardware plans available for provisioning."""

    def list(self, options: Optional[ListOptions] = None) -> List[Dict[str, Any]]:
        return self._list("plans", "plans", options)
