import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_CANVAS_SIZE = 2**8
LARGE_CANVAS_SIZE = 2**9 # larger canvas
DEFAULT_ORDER = 5


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {value!r}") from None


@dataclass
class Settings:
    root_dir: Path
    order: int
    canvas_size: int


def load_settings() -> Settings:
    """Reads settings from the environment, after loading a .env file if one exists."""
    load_dotenv()

    return Settings(
        root_dir=Path(os.getenv("ROOT_DIR", Path.cwd())),
        order=_env_int("HILBERT_ORDER", DEFAULT_ORDER),
        canvas_size=_env_int("HILBERT_CANVAS_SIZE", DEFAULT_CANVAS_SIZE),
    )
