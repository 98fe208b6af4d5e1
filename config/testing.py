import os

SECRET_KEY = "test-secret"

SQLALCHEMY_DATABASE_URI = "sqlite://"
SQLALCHEMY_TRACK_MODIFICATIONS = False

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = True

UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
CORS_ORIGIN = "http://localhost:3000"
