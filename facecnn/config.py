"""Runtime configuration read from environment variables."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATA_DIR = "./data"
DEFAULT_MODELS_DIR = "./models"
DEFAULT_LEARNING_RATE = 0.001
DEFAULT_EPOCHS = 10
DEFAULT_MODEL_TYPE = "Cnn"

_UNSIGNED = re.compile(r"\+?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _parse_float(text: str | None, default: float) -> float:
    if text is None or not _FLOAT.fullmatch(text):
        return default
    return float(text)


def _parse_unsigned(text: str | None, default: int) -> int:
    if text is None or not _UNSIGNED.fullmatch(text):
        return default
    return int(text)


@dataclass
class Config:
    """Directories and training hyper-parameters."""

    data_dir: Path = Path(DEFAULT_DATA_DIR)
    models_dir: Path = Path(DEFAULT_MODELS_DIR)
    learning_rate: float = DEFAULT_LEARNING_RATE
    epochs: int = DEFAULT_EPOCHS
    model_type: str = DEFAULT_MODEL_TYPE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """Build a configuration from the environment, falling back to defaults."""
        env = os.environ if environ is None else environ
        return cls(
            data_dir=Path(env.get("DATA_DIR", DEFAULT_DATA_DIR)),
            models_dir=Path(env.get("MODELS_DIR", DEFAULT_MODELS_DIR)),
            learning_rate=_parse_float(env.get("LEARNING_RATE"), DEFAULT_LEARNING_RATE),
            epochs=_parse_unsigned(env.get("EPOCHS"), DEFAULT_EPOCHS),
            model_type=env.get("MODEL_TYPE", DEFAULT_MODEL_TYPE),
        )

    def ensure_directories(self) -> None:
        """Create the data, models, raw and processed directories."""
        for directory in (
            self.data_dir,
            self.models_dir,
            self.data_dir / "raw",
            self.data_dir / "processed",
        ):
            directory.mkdir(parents=True, exist_ok=True)

    def model_save_path(self, filename: str) -> Path:
        """Path of a file inside the models directory."""
        return self.models_dir / filename