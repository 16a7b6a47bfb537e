import os

def get_settings_module() -> str:
    # Pick the settings module from APP_ENV; defaults to 'development'
    env = os.getenv("APP_ENV", "development").lower()

    # 1. Production
    if env in {"prod", "production"}:
        return "config.production"

    # 2. Testing
    if env in {"test", "testing"}:
        return "config.testing"

    # 3. Everything else runs with development settings
    return "config.development"
