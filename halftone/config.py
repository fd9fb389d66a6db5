import logging
import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DisplaySettings:
    duration: float  # seconds each image stays on screen, 0 = until dismissed
    seed: Optional[int]
    log_level: str

    @classmethod
    def from_env(cls) -> "DisplaySettings":
        seed = os.getenv("HALFTONE_SEED")
        return cls(
            duration=float(os.getenv("HALFTONE_DURATION", "2.0")),
            seed=int(seed) if seed else None,
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
        )


SETTINGS = DisplaySettings.from_env()


def configure_logging() -> logging.Logger:
    logging.basicConfig(level=SETTINGS.log_level)
    return logging.getLogger("halftone")
