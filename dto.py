from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


LIST_FIELDS = ('roles', 'permissions', 'role_default_permissions')


# DTO returned to admin API consumers for a single user
@dataclass(frozen=True)
class UserResponseDTO:
    id: int
    first_name: str
    last_name: str
    email: str
    active: bool
    created_at: Optional[datetime] = None
    # Role names assigned to the user
    roles: Tuple[str, ...] = field(default_factory=tuple)
    # Permissions explicitly granted to the user
    permissions: Tuple[str, ...] = field(default_factory=tuple)
    # Permissions inherited from the user's roles
    role_default_permissions: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Any iterable is accepted; a private tuple copy is stored
        for name in LIST_FIELDS:
            value = getattr(self, name)
            object.__setattr__(self, name, tuple(value) if value is not None else ())

    def to_dict(self):
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "active": self.active,
            "roles": list(self.roles),
            "permissions": list(self.permissions),
            "roleDefaultPermissions": list(self.role_default_permissions),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


# DTO for an entry of the permission catalogue
class PermissionDTO:
    def __init__(self, permission):
        self.id = permission.id
        self.name = permission.name
        self.description = permission.description
        self.category = permission.category
