from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnumHistoryBackend(str, Enum):
    MEMORY = "memory"
    FILE = "file"
    MONGO = "mongo"


HISTORY_SLOT_KEY = "cvd_history"
HISTORY_PAGE_SIZE = 10
HISTORY_RETENTION_DAYS = 30
