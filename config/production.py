import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

PORT = int(os.getenv("PORT", "3000"))

DATA_DIR = os.getenv("DATA_DIR", "data")

DEFAULT_ADMIN_PASSWORD = os.getenv("DEFAULT_ADMIN_PASSWORD", "admin123")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DATA = bool(int(os.getenv("AUTO_INIT_DATA", "1")))
