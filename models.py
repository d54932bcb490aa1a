from enum import Enum
from peewee import (
    Model, CharField, DateTimeField, BooleanField, ForeignKeyField, SqliteDatabase
)
from werkzeug.security import generate_password_hash, check_password_hash
import datetime

# Database is bound to a file in init_database()
db = SqliteDatabase(None)


class RoleName(Enum):
    ADMIN = "ADMIN"
    RESPONSABLE_ACHATS = "RESPONSABLE_ACHATS"
    MAGASINIER = "MAGASINIER"


class RoleNameField(CharField):
    """
    Stores a RoleName member as its string value.
    """

    def db_value(self, value):
        if value is None:
            return None
        return RoleName(value).value

    def python_value(self, value):
        if value is None:
            return None
        return RoleName(value)


class BaseModel(Model):
    created_at = DateTimeField(default=datetime.datetime.now)

    class Meta:
        database = db


class Permission(BaseModel):
    # Identifier such as PRODUCTS_READ
    name = CharField(unique=True)
    description = CharField(null=True)
    category = CharField(null=True)


class Role(BaseModel):
    name = RoleNameField(unique=True)

    # Default permissions in the order they were linked to the role
    @property
    def default_permissions(self):
        query = self.role_permissions.order_by(RolePermission.id)
        return [rp.permission for rp in query]


class User(BaseModel):
    first_name = CharField()
    last_name = CharField()
    email = CharField(unique=True)
    password_hash = CharField(null=True)
    active = BooleanField(default=True)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    @property
    def roles(self):
        query = self.user_roles.order_by(UserRole.id)
        return [ur.role for ur in query]

    @property
    def user_permissions(self):
        return list(self.permission_grants.order_by(UserPermission.id))


class UserRole(BaseModel):
    user = ForeignKeyField(User, backref='user_roles', on_delete='CASCADE')
    role = ForeignKeyField(Role, backref='user_roles', on_delete='CASCADE')

    class Meta:
        indexes = ((('user', 'role'), True),)


class RolePermission(BaseModel):
    role = ForeignKeyField(Role, backref='role_permissions', on_delete='CASCADE')
    permission = ForeignKeyField(Permission, backref='role_permissions', on_delete='CASCADE')

    class Meta:
        indexes = ((('role', 'permission'), True),)


class UserPermission(BaseModel):
    user = ForeignKeyField(User, backref='permission_grants', on_delete='CASCADE')
    permission = ForeignKeyField(Permission, backref='user_grants', on_delete='CASCADE')
    # False means the permission is explicitly revoked for the user
    granted = BooleanField(default=True)

    class Meta:
        indexes = ((('user', 'permission'), True),)


MODELS = [Permission, Role, User, UserRole, RolePermission, UserPermission]


def init_database(path):
    """
    Binds the database to the given file and creates missing tables.
    """
    db.init(path, pragmas={'foreign_keys': 1})
    db.connect(reuse_if_open=True)
    db.create_tables(MODELS, safe=True)
    db.close()
