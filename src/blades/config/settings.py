from pydantic_settings import BaseSettings
from pathlib import Path

class Settings(BaseSettings):
    # Roll dialog toggles
    action_roll_enabled: bool = True
    threat_roll_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_file: Path | None = None
    enable_color: bool = True

    class Config:
        env_file = ".env"
        env_prefix = "BLADES_"

settings = Settings()
