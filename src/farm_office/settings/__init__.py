import os


def get_settings_module() -> str:
    # Environment comes from APP_ENV, default 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "farm_office.settings.production"

    if env in {"test", "testing"}:
        return "farm_office.settings.testing"

    return "farm_office.settings.development"
