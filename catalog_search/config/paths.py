"""Application paths configuration."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppPaths:
    config_path: Path

    @classmethod
    def default(cls) -> "AppPaths":
        return cls(config_path=Path("settings.yml"))
