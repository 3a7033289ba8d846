"""
War Room Permissions
====================

Role-based access derived from Jira group membership.

Accounts in none of the war-room groups keep full access so that sites
without these groups configured behave as before roles existed.
"""

from typing import Dict, Iterable, List, Optional

ROLES: Dict[str, List[str]] = {
    "incident-commanders": ["create", "close", "escalate", "assign", "delete"],
    "oncall-engineers": ["create", "update", "comment"],
    "developers": ["view", "comment"],
    "observers": ["view"],
}

ROLE_LABELS: Dict[str, str] = {
    "incident-commanders": "Incident Commander",
    "oncall-engineers": "On-Call Engineer",
    "developers": "Developer",
    "observers": "Observer",
}

# Highest precedence first
ROLE_PRECEDENCE = ["incident-commanders", "oncall-engineers", "developers", "observers"]

UNRESTRICTED_PERMISSIONS = ["view", "create", "update", "delete", "comment"]


def get_user_permissions(user_groups: Iterable[str]) -> List[str]:
    """
    Union of actions granted by the user's war-room groups.

    Returns a sorted list; ``view`` is always included.
    """
    groups = list(user_groups)
    role_groups = [g for g in groups if g in ROLES]

    if role_groups:
        permissions = {action for g in role_groups for action in ROLES[g]}
    else:
        permissions = set(UNRESTRICTED_PERMISSIONS)

    permissions.add("view")
    return sorted(permissions)


def has_permission(permissions: Iterable[str], action: str) -> bool:
    return action in permissions


def get_primary_role(user_groups: Iterable[str]) -> Optional[str]:
    """Most senior war-room role held, or None when the user has none."""
    groups = set(user_groups)
    for role in ROLE_PRECEDENCE:
        if role in groups:
            return role
    return None
