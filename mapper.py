"""
Projection of users and their role/permission associations onto UserResponseDTO.

Every function here accepts partially loaded object graphs: a collection that
is None is treated as empty.

Role names must belong to RoleName; any other name raises ValueError
instead of leaking an unknown role into the response.
"""
from dto import UserResponseDTO
from models import RoleName


def _items(collection):
    if collection is None:
        return []
    return list(collection)


def _role_name(role):
    return RoleName(role.name).value


def map_roles(user):
    return [_role_name(role) for role in _items(user.roles)]


def map_user_permissions(user):
    """
    Names of permissions explicitly granted to the user. Revoked grants are left out.
    """
    return [
        grant.permission.name
        for grant in _items(user.user_permissions)
        if grant.granted
    ]


def map_role_default_permissions(user):
    """
    Default permission names of all the user's roles, each name once,
    in the order it first appears.
    """
    names = []
    seen = set()
    for role in _items(user.roles):
        for permission in _items(role.default_permissions):
            if permission.name not in seen:
                seen.add(permission.name)
                names.append(permission.name)
    return names


def project(user):
    return UserResponseDTO(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        active=user.active,
        created_at=user.created_at,
        roles=map_roles(user),
        permissions=map_user_permissions(user),
        role_default_permissions=map_role_default_permissions(user),
    )


def project_all(users):
    return [project(user) for user in users]
