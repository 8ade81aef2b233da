import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

PORT = int(os.getenv("PORT", "3000"))

# One JSON file per collection lives here
DATA_DIR = os.getenv("DATA_DIR", "data")

# Password given to the admin account generated with each organization
DEFAULT_ADMIN_PASSWORD = os.getenv("DEFAULT_ADMIN_PASSWORD", "admin123")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Create missing collection files on startup
AUTO_INIT_DATA = bool(int(os.getenv("AUTO_INIT_DATA", "1")))
