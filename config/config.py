import os
import urllib.parse


def database_uri(default_name: str = "employee_management_db") -> str:
    """DATABASE_URL wins; otherwise build a MySQL URL from the DB_* variables."""
    url = os.environ.get("DATABASE_URL")
    if url:
        return url

    user = os.environ.get("DB_USER", "root")
    password = urllib.parse.quote_plus(os.environ.get("DB_PASSWORD", ""))
    host = os.environ.get("DB_HOST", "localhost")
    port = int(os.environ.get("DB_PORT", "3306"))
    name = os.environ.get("DB_NAME", default_name)
    return f"mysql+mysqlconnector://{user}:{password}@{host}:{port}/{name}"


def env_flag(name: str, default: str) -> bool:
    return bool(int(os.environ.get(name, default)))
