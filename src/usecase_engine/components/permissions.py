"""Authorization predicates — allow_all, authenticated, has_role, has_permission.

Each predicate takes the acting user and returns ``Ok(user)`` or an ``Err``
with a short reason, ready to pass as ``UseCase(authorize=...)``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from usecase_engine.result import Err, Ok, Result

Predicate = Callable[[Any], Result[Any, str]]


def allow_all(user: Any) -> Result[Any, str]:
    return Ok(user)


def authenticated(user: Any) -> Result[Any, str]:
    """Deny anonymous callers (``user is None``)."""
    if user is None:
        return Err("Authentication required")
    return Ok(user)


def _get_collection(user: object, attr: str) -> list[str] | None:
    """Extract a collection from user by dict key or attribute."""
    if isinstance(user, dict):
        val: list[str] | None = user.get(attr)
        return val
    return getattr(user, attr, None)


def has_role(role: str) -> Predicate:
    """Predicate granting access to users whose ``roles`` include ``role``."""

    def check(user: Any) -> Result[Any, str]:
        roles = _get_collection(user, "roles")
        if roles is None or role not in roles:
            return Err(f"Missing role: {role}")
        return Ok(user)

    check.__name__ = f"has_role({role!r})"
    return check


def has_permission(permission: str) -> Predicate:
    """Predicate granting access to users holding ``permission``."""

    def check(user: Any) -> Result[Any, str]:
        permissions = _get_collection(user, "permissions")
        if permissions is None or permission not in permissions:
            return Err(f"Missing permission: {permission}")
        return Ok(user)

    check.__name__ = f"has_permission({permission!r})"
    return check
