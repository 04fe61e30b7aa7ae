from typing import Any, Dict

from .base import Service


class EmailService(Service):

    def get(self, email_id: str) -> Dict[str, Any]:
        return self._fetch("GET", f"emails/{email_id}")
