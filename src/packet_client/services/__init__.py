"""Resource service objects attached to every Client."""

from .base import Service
from .devices import DeviceService
from .emails import EmailService
from .facilities import FacilityService
from .operating_systems import OSService
from .plans import PlanService
from .projects import ProjectService
from .ssh_keys import SshKeyService
from .users import UserService

__all__ = [
    "Service",
    "DeviceService",
    "EmailService",
    "FacilityService",
    "OSService",
    "PlanService",
    "ProjectService",
    "SshKeyService",
    "UserService",
]
