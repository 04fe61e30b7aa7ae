from typing import Any, Dict, List, Optional

from ..core.options import ListOptions
from ..core.response import Response
from .base import Service


class DeviceService(Service):
    """Devices are listed and created per project, addressed by id otherwise."""

    def list(self, project_id: str, options: Optional[ListOptions] = None) -> List[Dict[str, Any]]:
        return self._list(f"projects/{project_id}/devices", "devices", options)

    def get(self, device_id: str) -> Dict[str, Any]:
        return self._fetch("GET", f"devices/{device_id}")

    def create(self, project_id: str, request: Dict[str, Any]) -> Dict[str, Any]:
        """
        Provision a device.

        ``request`` is sent as-is, e.g.
        ``{"hostname": "web1", "plan": "baremetal_0", "facility": "ewr1",
        "operating_system": "ubuntu_14_04", "billing_cycle": "hourly"}``.
        """
        return self._fetch("POST", f"projects/{project_id}/devices", request)

    def delete(self, device_id: str) -> Response:
        return self._delete(f"devices/{device_id}")

    def power_on(self, device_id: str) -> Response:
        return self._action(device_id, "power_on")

    def power_off(self, device_id: str) -> Response:
        return self._action(device_id, "power_off")

    def reboot(self, device_id: str) -> Response:
        return self._action(device_id, "reboot")

    def _action(self, device_id: str, action: str) -> Response:
        request = self.client.new_request("POST", f"devices/{device_id}/actions", {"type": action})
        return self.client.do(request)
