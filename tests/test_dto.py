import dataclasses
from datetime import datetime
from types import SimpleNamespace

import pytest

from dto import PermissionDTO, UserResponseDTO


def make_dto(**overrides):
    fields = dict(
        id=7,
        first_name="Youssef",
        last_name="Alaoui",
        email="youssef@tricol.local",
        active=True,
        created_at=datetime(2025, 1, 2, 3, 4, 5),
    )
    fields.update(overrides)
    return UserResponseDTO(**fields)


class TestUserResponseDTO:
    def test_list_fields_default_to_empty(self):
        dto = make_dto()
        assert dto.roles == ()
        assert dto.permissions == ()
        assert dto.role_default_permissions == ()

    def test_none_list_fields_become_empty(self):
        dto = make_dto(roles=None, permissions=None, role_default_permissions=None)
        assert dto.roles == ()
        assert dto.permissions == ()
        assert dto.role_default_permissions == ()

    def test_is_immutable(self):
        dto = make_dto()
        with pytest.raises(dataclasses.FrozenInstanceError):
            dto.email = "other@tricol.local"

    def test_list_fields_cannot_be_extended(self):
        dto = make_dto(roles=["MAGASINIER"])
        with pytest.raises(AttributeError):
            dto.roles.append("ADMIN")
        assert dto.roles == ("MAGASINIER",)

    def test_source_list_is_copied(self):
        roles = ["MAGASINIER"]
        granted = ["STOCK_READ"]
        dto = make_dto(roles=roles, permissions=granted)
        roles.append("ADMIN")
        granted.clear()
        assert dto.roles == ("MAGASINIER",)
        assert dto.permissions == ("STOCK_READ",)

    def test_equal_values_hash_equal(self):
        first = make_dto(roles=["ADMIN"], role_default_permissions=["ADMIN_USERS"])
        second = make_dto(roles=("ADMIN",), role_default_permissions=("ADMIN_USERS",))
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_to_dict_uses_wire_names(self):
        dto = make_dto(
            roles=["ADMIN"],
            permissions=["ADMIN_USERS"],
            role_default_permissions=["STOCK_READ"],
        )
        assert dto.to_dict() == {
            "id": 7,
            "firstName": "Youssef",
            "lastName": "Alaoui",
            "email": "youssef@tricol.local",
            "active": True,
            "roles": ["ADMIN"],
            "permissions": ["ADMIN_USERS"],
            "roleDefaultPermissions": ["STOCK_READ"],
            "createdAt": "2025-01-02T03:04:05",
        }

    def test_to_dict_without_timestamp(self):
        assert make_dto(created_at=None).to_dict()["createdAt"] is None


def test_permission_dto_fields():
    permission = SimpleNamespace(id=3, name="ORDERS_READ", description="Orders read", category="Orders")
    assert PermissionDTO(permission).__dict__ == {
        "id": 3,
        "name": "ORDERS_READ",
        "description": "Orders read",
        "category": "Orders",
    }
