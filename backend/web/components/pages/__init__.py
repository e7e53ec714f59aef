"""Full-page content components."""

from .landing import LandingPage
from .role_select import RoleSelectPage

__all__ = ["LandingPage", "RoleSelectPage"]
