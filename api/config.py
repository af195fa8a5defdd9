import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# Configuration for the HTTP service
class Settings:
    HOST = os.getenv("ARTICULATION_HOST", "0.0.0.0")
    PORT = int(os.getenv("ARTICULATION_PORT", "5000"))
    DEBUG = _env_bool("ARTICULATION_DEBUG", False)
    LOG_LEVEL = os.getenv("ARTICULATION_LOG_LEVEL", "INFO").upper()

    # Request limits
    MAX_CONTENT_LENGTH = 2 * 1024 * 1024  # 2MB
