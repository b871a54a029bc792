from itertools import combinations

import pytest

from xenia.domain.entities import MembershipRole
from xenia.domain.roles import ROLE_ORDER, has_minimum_role, max_role_rank

ALL_ROLES = list(MembershipRole)

ROLE_SETS = [
    list(subset)
    for size in range(len(ALL_ROLES) + 1)
    for subset in combinations(ALL_ROLES, size)
]


def test_role_order_is_member_admin_owner():
    assert ROLE_ORDER[MembershipRole.member] < ROLE_ORDER[MembershipRole.admin]
    assert ROLE_ORDER[MembershipRole.admin] < ROLE_ORDER[MembershipRole.owner]


def test_empty_role_list_ranks_as_member():
    assert max_role_rank([]) == 0


@pytest.mark.parametrize("roles", ROLE_SETS)
@pytest.mark.parametrize("minimum", ALL_ROLES)
def test_has_minimum_role_compares_highest_rank(roles, minimum):
    expected = max((ROLE_ORDER[r] for r in roles), default=0) >= ROLE_ORDER[minimum]
    assert has_minimum_role(roles, minimum) is expected


@pytest.mark.parametrize("roles", ROLE_SETS)
def test_no_minimum_always_passes(roles):
    assert has_minimum_role(roles, None) is True


def test_plain_string_roles_are_accepted():
    assert has_minimum_role(["admin"], MembershipRole.admin) is True
    assert has_minimum_role(["member"], MembershipRole.admin) is False
