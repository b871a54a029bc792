"""
Role Check

Third gate: a pure predicate over the resolved role list.
"""

from typing import Optional

from xenia.domain.auth_context import Authorized
from xenia.domain.entities import MembershipRole
from xenia.domain.roles import has_minimum_role
from xenia.libs.result import Error, Result, Return

INSUFFICIENT_ROLE = Error("INSUFFICIENT_ROLE", "Insufficient role")


def check_role(
    context: Authorized, minimum: Optional[MembershipRole]
) -> Result[Authorized]:
    """Pass the context through when its highest role reaches ``minimum``."""
    if not has_minimum_role(context.roles, minimum):
        return Return.err(INSUFFICIENT_ROLE)
    return Return.ok(context)
