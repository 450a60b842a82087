from typing import Any, Dict, FrozenSet, Mapping, Optional

VIEW_ANALYTICS = "analytics:read"

ROLE_PERMISSIONS: Mapping[str, FrozenSet[str]] = {
    "admin": frozenset({VIEW_ANALYTICS}),
}


def permissions_for(role: Optional[str]) -> FrozenSet[str]:
    if not role:
        return frozenset()
    return ROLE_PERMISSIONS.get(role, frozenset())


def has_permission(user: Optional[Dict[str, Any]], permission: str) -> bool:
    if not user:
        return False
    return permission in permissions_for(user.get("role"))
