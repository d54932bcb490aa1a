import config
from controllers import app
from models import init_database
from seed import seed_database


def bootstrap():
    app.logger.setLevel(config.LOG_LEVEL)
    init_database(config.DATABASE_PATH)
    app.logger.info(f"Database ready at {config.DATABASE_PATH}")

    if config.SEED_ON_START:
        counts = seed_database(config.ADMIN_EMAIL, config.ADMIN_PASSWORD)
        app.logger.info(
            f"Seeded {counts['permissions']} permissions, {counts['roles']} roles, "
            f"{counts['role_permissions']} role defaults"
        )
        if counts["admin"]:
            app.logger.info(f"Administrator account {config.ADMIN_EMAIL} created")
            if not config.ADMIN_PASSWORD:
                app.logger.warning("ADMIN_PASSWORD is not set: the administrator account has no password")
    return app


if __name__ == '__main__':
    bootstrap().run(debug=config.FLASK_DEBUG)
