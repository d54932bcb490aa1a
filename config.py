from dotenv import load_dotenv
import os


# Load environment variables from the .env file
load_dotenv()

# Path of the SQLite database file
DATABASE_PATH = os.getenv("DATABASE_PATH", "tricol.db")
# Prefix every admin route is mounted under
API_PREFIX = os.getenv("API_PREFIX", "/tricol/api/v2")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# Seed roles, permissions and the admin account on start-up
SEED_ON_START = os.getenv("SEED_ON_START", "true").lower() in ("1", "true", "yes")
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@tricol.local")
# No default: without it the admin account is created with no usable password
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")
FLASK_DEBUG = os.getenv("FLASK_DEBUG", "false").lower() in ("1", "true", "yes")
