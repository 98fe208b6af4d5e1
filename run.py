import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src" / "employee_management"))

from werkzeug.middleware.proxy_fix import ProxyFix

from employee_management import create_app

app = create_app()

# Handle reverse proxy headers (Nginx)
app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_host=1, x_proto=1, x_prefix=1)

if __name__ == "__main__":
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8080")), debug=app.config.get("DEBUG", False))
