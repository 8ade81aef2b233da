import os

SECRET_KEY = "test-secret"

PORT = int(os.getenv("PORT", "3000"))

DATA_DIR = os.getenv("DATA_DIR", "data-test")

DEFAULT_ADMIN_PASSWORD = "admin123"

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DATA = bool(int(os.getenv("AUTO_INIT_DATA", "0")))
