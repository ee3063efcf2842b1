import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json").lower()
STORAGE_PATH = os.getenv("STORAGE_PATH", "data/faltas.json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "escuela:faltas:v1")
FREE_THRESHOLD = float(os.getenv("FREE_THRESHOLD", "20"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "absence_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

# If enabled with STORAGE_BACKEND=mysql, app will apply schema.sql on startup (CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
