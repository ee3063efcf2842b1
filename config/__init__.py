import os

def get_settings_module() -> str:
    # Settings module chosen by APP_ENV, defaults to 'development'
    env = os.getenv("APP_ENV", "development").lower()

    # 1. Production
    if env in {"prod", "production"}:
        return "config.production"
    
    # 2. Testing
    if env in {"test", "testing"}:
        return "config.testing"
    
    # 3. Development for everything else
    return "config.development"
