"""
Role capability table.

The only place role values are interpreted. Routes and use cases ask
has_capability() instead of comparing role strings.
"""

from typing import FrozenSet, Mapping, Union

from dao_auth.domain.entities.enums import Capability, UserRole

ROLE_CAPABILITIES: Mapping[UserRole, FrozenSet[Capability]] = {
    UserRole.admin: frozenset(
        {Capability.manage_users, Capability.edit_daos, Capability.view_daos}
    ),
    UserRole.user: frozenset({Capability.edit_daos, Capability.view_daos}),
    UserRole.viewer: frozenset({Capability.view_daos}),
}


def has_capability(role: Union[UserRole, str], capability: Capability) -> bool:
    """Return True if the role grants the capability. Unknown roles grant nothing."""
    try:
        role = UserRole(role)
    except ValueError:
        return False
    return capability in ROLE_CAPABILITIES[role]
