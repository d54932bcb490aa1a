import pytest

from controllers import app as flask_app
from models import db, init_database, Permission, Role, RolePermission, User, UserRole
from seed import seed_database


@pytest.fixture
def database(tmp_path):
    init_database(str(tmp_path / "tricol-test.db"))
    yield db
    if not db.is_closed():
        db.close()


@pytest.fixture
def seeded(database):
    return seed_database("admin@tricol.local", "secret")


@pytest.fixture
def app(database):
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def create_user(database):
    def _create_user(email, first_name="Jane", last_name="Doe", active=True, roles=()):
        user = User.create(first_name=first_name, last_name=last_name, email=email, active=active)
        for role_name in roles:
            UserRole.create(user=user, role=Role.get(Role.name == role_name))
        return user
    return _create_user


@pytest.fixture
def create_role(database):
    def _create_role(role_name, permission_names=()):
        role = Role.create(name=role_name)
        for name in permission_names:
            permission, _ = Permission.get_or_create(name=name)
            RolePermission.create(role=role, permission=permission)
        return role
    return _create_role
