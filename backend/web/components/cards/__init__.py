"""Card components."""

from .role_card import RoleCard

__all__ = ["RoleCard"]
