"""Caller identity for the CLI entry points.

Authentication is outside this application: the caller states who they
are (``--user``/``--role`` or the matching environment variables) and the
entry points only check the role before invoking privileged use cases.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum

import click


class Role(Enum):
    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class Principal:
    user_id: int | None
    role: Role

    def require_user(self) -> int:
        if self.user_id is None:
            raise click.UsageError("This command needs --user (or STOREFRONT_USER_ID).")
        return self.user_id


def current_principal() -> Principal:
    return click.get_current_context().find_object(Principal)


def requires_role(role: Role):
    """Reject the command unless the caller holds *role*."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            principal = current_principal()
            if principal.role is not role:
                raise click.ClickException(f"Forbidden: requires {role.value} role")
            return func(*args, **kwargs)

        return wrapper

    return decorator
