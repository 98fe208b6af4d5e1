from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "employee_management"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from employee_management import create_app, db_label
from employee_management.database.bootstrap import list_tables


def main() -> None:
    # create_app() applies the schema and then seeds the admin account
    app = create_app({"AUTO_INIT_DB": True})
    with app.app_context():
        tables = list_tables()

    print(f"OK: Applied schema -> {db_label(app.config['SQLALCHEMY_DATABASE_URI'])} (tables={len(tables)})")


if __name__ == "__main__":
    main()
