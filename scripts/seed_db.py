from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "employee_management"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from employee_management import create_app, db_label, get_container
from employee_management.core.enums import Role

DEMO_USERS = [
    {"username": "employee", "password": "employee123", "name": "Demo Employee", "email": "employee@example.com", "role": Role.EMPLOYEE.value},
    {"username": "customer", "password": "customer123", "name": "Demo Customer", "email": "customer@example.com", "role": Role.CUSTOMER.value},
]


def main() -> None:
    app = create_app()
    container = get_container(app)

    with app.app_context():
        for demo in DEMO_USERS:
            if container.credentials_repo.exists_by_username(demo["username"]):
                print(f"skip: {demo['username']} already exists")
                continue
            container.auth_service.signup(**demo)
            print(f"created: {demo['username']} ({demo['role']})")

    print(f"OK: Seeded database -> {db_label(app.config['SQLALCHEMY_DATABASE_URI'])}")


if __name__ == "__main__":
    main()
