"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_STORAGE_KEY = "escuela:faltas:v1"
DEFAULT_FREE_THRESHOLD = 20
DEFAULT_STORAGE_FILE = "faltas.json"
