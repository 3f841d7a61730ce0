from config.config import *  # noqa: F401,F403

DEBUG = False
TESTING = True

STORAGE_BACKEND = "memory"
MEMORY_STORE_PATH = None
LOG_LEVEL = "WARNING"

DEFAULT_OVERTIME = False
INCLUDE_BONUS = True
INCLUDE_OVERTIME = True
INCLUDE_LATE_DEDUCTION = True

AUTO_INIT_DB = False
