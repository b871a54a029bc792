from typing import Iterable, Optional

from .entities.enums import MembershipRole

ROLE_ORDER = {
    MembershipRole.member: 0,
    MembershipRole.admin: 1,
    MembershipRole.owner: 2,
}


def max_role_rank(roles: Iterable[MembershipRole]) -> int:
    """Highest rank present, 0 for an empty collection."""
    return max((ROLE_ORDER[MembershipRole(role)] for role in roles), default=0)


def has_minimum_role(
    roles: Iterable[MembershipRole], minimum: Optional[MembershipRole]
) -> bool:
    if minimum is None:
        return True
    return max_role_rank(roles) >= ROLE_ORDER[minimum]
