"""Application configuration."""
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    """Application configuration loaded from environment variables."""
    
    # Deck self-checks (re-validate the pack invariant around every draw)
    deck_debug_checks: bool = _env_flag("DECK_DEBUG_CHECKS")
    
    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


config = Config()
