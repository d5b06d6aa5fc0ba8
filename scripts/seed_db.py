from __future__ import annotations

import importlib
import sys

from dotenv import load_dotenv

from farm_office.database.bootstrap import ensure_admin_user
from farm_office.settings import get_settings_module


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    login = getattr(settings, "ADMIN_LOGIN", "admin")
    password = getattr(settings, "ADMIN_PASSWORD", "")
    if not password:
        sys.exit("ADMIN_PASSWORD is not set")

    created = ensure_admin_user(db_config, login=login, password=password)
    print(f"OK: admin account {login!r} {'created' if created else 'already exists'}")


if __name__ == "__main__":
    main()
