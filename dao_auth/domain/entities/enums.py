"""
DAO Auth Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user in the DAO management application"""

    admin = "admin"
    user = "user"
    viewer = "viewer"


class Capability(str, Enum):
    """Action a role may be granted"""

    manage_users = "manage_users"
    edit_daos = "edit_daos"
    view_daos = "view_daos"
