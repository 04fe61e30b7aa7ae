from typing import Any, Dict

from .base import Service


class UserService(Service):

    def get(self, user_id: str) -> Dict[str, Any]:
        return self._fetch("GET", f"users/{user_id}")

    def current(self) -> Dict[str, Any]:
        """The user owning the API key."""
        return self._fetch("GET", "user")
