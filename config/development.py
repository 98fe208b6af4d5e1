import os

from .config import database_uri, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SQLALCHEMY_DATABASE_URI = database_uri()
SQLALCHEMY_TRACK_MODIFICATIONS = False

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Create missing tables on startup (idempotent)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")

UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
CORS_ORIGIN = os.getenv("CORS_ORIGIN", "http://localhost:3000")
