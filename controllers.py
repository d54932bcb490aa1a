from flask import Flask, request, jsonify
from peewee import IntegrityError, OperationalError
from werkzeug.exceptions import HTTPException

import config
from dto import PermissionDTO
from mapper import project, project_all
from models import db, Permission, Role, RoleName, User, UserPermission, UserRole

app = Flask(__name__)

ADMIN_PREFIX = f"{config.API_PREFIX}/admin"


@app.before_request
def open_connection():
    db.connect(reuse_if_open=True)


@app.teardown_request
def close_connection(exc):
    if not db.is_closed():
        db.close()


def parse_role_name(value):
    if not value:
        raise ValueError("roleName is required")
    try:
        return RoleName(value.upper())
    except ValueError:
        raise ValueError(f"Unknown role: {value}")


def parse_granted(value):
    if value is None:
        raise ValueError("granted is required")
    lowered = value.lower()
    if lowered not in ("true", "false"):
        raise ValueError("granted must be true or false")
    return lowered == "true"


@app.route(f'{ADMIN_PREFIX}/users', methods=['GET'])
def get_users():
    users = User.select().order_by(User.id)
    return jsonify([dto.to_dict() for dto in project_all(users)]), 200


@app.route(f'{ADMIN_PREFIX}/users/<int:user_id>', methods=['GET'])
def get_user(user_id):
    user = User.get_or_none(User.id == user_id)
    if not user:
        return jsonify({"error": "User not found"}), 404
    return jsonify(project(user).to_dict()), 200


@app.route(f'{ADMIN_PREFIX}/users/<int:user_id>/assign-role', methods=['POST'])
def assign_role(user_id):
    try:
        role_name = parse_role_name(request.args.get('roleName'))
    except ValueError as ve:
        return jsonify({"error": str(ve)}), 400

    user = User.get_or_none(User.id == user_id)
    if not user:
        return jsonify({"error": "User not found"}), 404
    role = Role.get_or_none(Role.name == role_name)
    if not role:
        return jsonify({"error": "Role not found"}), 404

    # A user holds a single role: the new one replaces any previous assignment
    try:
        with db.atomic():
            UserRole.delete().where(UserRole.user == user).execute()
            UserRole.create(user=user, role=role)
    except OperationalError as oe:
        app.logger.error(f"Failed to assign role {role_name.value} to user {user_id}: {oe}")
        return jsonify({"error": "Failed to assign role"}), 500

    app.logger.info(f"Role {role_name.value} assigned to user {user_id}")
    return "Role assigned successfully", 200


@app.route(f'{ADMIN_PREFIX}/users/<int:user_id>/permissions/<int:permission_id>', methods=['POST'])
def update_user_permission(user_id, permission_id):
    try:
        granted = parse_granted(request.args.get('granted'))
    except ValueError as ve:
        return jsonify({"error": str(ve)}), 400

    user = User.get_or_none(User.id == user_id)
    if not user:
        return jsonify({"error": "User not found"}), 404
    permission = Permission.get_or_none(Permission.id == permission_id)
    if not permission:
        return jsonify({"error": "Permission not found"}), 404

    try:
        with db.atomic():
            grant, created = UserPermission.get_or_create(
                user=user, permission=permission, defaults={"granted": granted}
            )
            if not created and grant.granted != granted:
                grant.granted = granted
                grant.save()
    except (OperationalError, IntegrityError) as e:
        app.logger.error(f"Failed to update permission {permission.name} for user {user_id}: {e}")
        return jsonify({"error": "Failed to update permission"}), 500

    state = "granted" if granted else "revoked"
    app.logger.info(f"Permission {permission.name} {state} for user {user_id}")
    return f"Permission {permission.name} {state} successfully", 200


@app.route(f'{ADMIN_PREFIX}/users/<int:user_id>/permissions/<int:permission_id>', methods=['DELETE'])
def remove_user_permission(user_id, permission_id):
    grant = UserPermission.get_or_none(
        (UserPermission.user == user_id) & (UserPermission.permission == permission_id)
    )
    if not grant:
        return jsonify({"error": "User permission not found"}), 404

    name = grant.permission.name
    try:
        with db.atomic():
            grant.delete_instance()
    except OperationalError as oe:
        app.logger.error(f"Failed to remove permission {name} from user {user_id}: {oe}")
        return jsonify({"error": "Failed to remove permission"}), 500

    app.logger.info(f"Explicit permission {name} removed from user {user_id}")
    return "Permission removed successfully", 200


@app.route(f'{ADMIN_PREFIX}/permissions', methods=['GET'])
def get_permissions():
    permissions = Permission.select().order_by(Permission.id)
    return jsonify([PermissionDTO(p).__dict__ for p in permissions]), 200


@app.errorhandler(Exception)
def handle_exception(e):
    if isinstance(e, HTTPException):
        return e
    app.logger.error(f"Unhandled error: {e}")
    return jsonify({"error": "An unexpected error occurred"}), 500
