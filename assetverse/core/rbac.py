from enum import Enum


class Role(str, Enum):
    HR = "hr"
    EMPLOYEE = "employee"


ROLE_PERMISSIONS: dict[Role, set[str]] = {
    Role.HR: {
        "assets:read",
        "assets:manage",
        "requests:create",
        "requests:read",
        "requests:process",
        "assignments:return",
        "affiliations:read",
        "affiliations:remove",
        "packages:upgrade",
        "payments:read",
    },
    Role.EMPLOYEE: {
        "assets:read",
        "requests:create",
        "requests:read",
        "assignments:return",
        "affiliations:read",
    },
}


def has_permission(role: Role | str, permission: str) -> bool:
    try:
        role = Role(role)
    except ValueError:
        return False
    return permission in ROLE_PERMISSIONS.get(role, set())
