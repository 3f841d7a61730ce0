"""Shared settings read from the environment; imported by the env modules."""

import os


def env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_db"),
}

# 'mysql' or 'memory' (fallback store, optionally persisted to MEMORY_STORE_PATH)
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql").lower()
MEMORY_STORE_PATH = os.getenv("MEMORY_STORE_PATH") or None

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Used for workers without their own default overtime setting
DEFAULT_OVERTIME = env_flag("DEFAULT_OVERTIME", "0")

INCLUDE_BONUS = env_flag("INCLUDE_BONUS", "1")
INCLUDE_OVERTIME = env_flag("INCLUDE_OVERTIME", "1")
INCLUDE_LATE_DEDUCTION = env_flag("INCLUDE_LATE_DEDUCTION", "1")
