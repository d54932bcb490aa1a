from models import db, Permission, Role, RoleName, RolePermission, User, UserRole


PERMISSIONS = {
    "Suppliers": ["SUPPLIERS_READ", "SUPPLIERS_WRITE"],
    "Products": ["PRODUCTS_READ", "PRODUCTS_WRITE", "PRODUCTS_CONFIGURE_ALERTS"],
    "Orders": ["ORDERS_READ", "ORDERS_WRITE", "ORDERS_VALIDATE", "ORDERS_CANCEL", "ORDERS_RECEIVE"],
    "Stock": ["STOCK_READ", "STOCK_VALUATION", "STOCK_HISTORY"],
    "Exit slips": ["EXIT_SLIPS_READ", "EXIT_SLIPS_CREATE", "EXIT_SLIPS_VALIDATE", "EXIT_SLIPS_CANCEL"],
    "Admin": ["ADMIN_USERS"],
}

# Permissions each role carries by default; ADMIN gets the whole catalogue
ROLE_DEFAULT_PERMISSIONS = {
    RoleName.RESPONSABLE_ACHATS: [
        "SUPPLIERS_READ", "SUPPLIERS_WRITE",
        "PRODUCTS_READ",
        "ORDERS_READ", "ORDERS_WRITE", "ORDERS_VALIDATE", "ORDERS_CANCEL",
        "STOCK_READ",
    ],
    RoleName.MAGASINIER: [
        "PRODUCTS_READ",
        "ORDERS_READ", "ORDERS_RECEIVE",
        "STOCK_READ", "STOCK_HISTORY",
        "EXIT_SLIPS_READ", "EXIT_SLIPS_CREATE", "EXIT_SLIPS_VALIDATE", "EXIT_SLIPS_CANCEL",
    ],
}


def seed_permissions():
    created = 0
    with db.atomic():
        for category, names in PERMISSIONS.items():
            for name in names:
                _, was_created = Permission.get_or_create(
                    name=name,
                    defaults={
                        "category": category,
                        "description": name.replace("_", " ").capitalize(),
                    },
                )
                created += was_created
    return created


def seed_roles():
    created = 0
    with db.atomic():
        for role_name in RoleName:
            _, was_created = Role.get_or_create(name=role_name)
            created += was_created
    return created


def assign_default_permissions():
    permissions = {p.name: p for p in Permission.select().order_by(Permission.id)}
    defaults = dict(ROLE_DEFAULT_PERMISSIONS)
    defaults[RoleName.ADMIN] = list(permissions)

    created = 0
    with db.atomic():
        for role_name, names in defaults.items():
            role = Role.get(Role.name == role_name)
            for name in names:
                _, was_created = RolePermission.get_or_create(role=role, permission=permissions[name])
                created += was_created
    return created


def seed_admin(email, password):
    """
    Creates the administrator account if it does not exist yet.
    Without a password the account cannot log in until one is set.
    Returns True when a new account was created.
    """
    if User.select().where(User.email == email).exists():
        return False
    with db.atomic():
        admin = User(first_name="Admin", last_name="Tricol", email=email)
        if password:
            admin.set_password(password)
        admin.save()
        UserRole.create(user=admin, role=Role.get(Role.name == RoleName.ADMIN))
    return True


def seed_database(admin_email, admin_password):
    return {
        "permissions": seed_permissions(),
        "roles": seed_roles(),
        "role_permissions": assign_default_permissions(),
        "admin": seed_admin(admin_email, admin_password),
    }
