from pydantic import BaseModel
import os


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Animations without frames are a caller policy; off unless asked for.
    allow_empty_frames: bool = _env_flag("ALLOW_EMPTY_FRAMES")

settings = Settings()
