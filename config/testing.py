SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
DATA_DIR = "data-test"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "shopkeeper_test",
}

GEMINI_API_KEY = None
GEMINI_MODEL = "gemini-2.5-flash"
ASSISTANT_TIMEOUT_SECONDS = 5.0

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
