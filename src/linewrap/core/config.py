from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import WrapOptions


class Settings(BaseSettings):
    # Wrapping defaults (used by the CLI; library calls use WrapOptions defaults)
    LINEWRAP_WIDTH: int = 70
    LINEWRAP_TAB_SIZE: int = 8
    LINEWRAP_PLACEHOLDER: str = " [...]"
    LINEWRAP_BREAK_LONG_WORDS: bool = True
    LINEWRAP_BREAK_ON_HYPHENS: bool = True
    LINEWRAP_FIX_SENTENCE_ENDINGS: bool = False

    # Observability
    LOG_FORMAT: str = "auto"  # json|plain|auto
    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Minimum level for structured log events",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @classmethod
    def load_config(cls, config_file: Optional[str] = None) -> "Settings":
        """Load settings with config file -> env -> CLI precedence."""
        config_data: Dict[str, Any] = {}

        # Find config file
        if config_file:
            config_path: Optional[Path] = Path(config_file)
        else:
            # Auto-discover .linewrap.{yaml,yml,toml}
            for ext in ["yaml", "yml", "toml"]:
                config_path = Path(f".linewrap.{ext}")
                if config_path.exists():
                    break
            else:
                config_path = None

        if config_path and config_path.exists():
            if config_path.suffix in [".yaml", ".yml"]:
                import yaml  # type: ignore[import-untyped]

                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            elif config_path.suffix == ".toml":
                import tomllib

                with open(config_path, "rb") as f:
                    config_data = tomllib.load(f)

        # Config file values are passed as init kwargs, which rank below
        # the environment (see settings_customise_sources)
        return cls(**config_data)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    def wrap_options(self, **overrides: Any) -> WrapOptions:
        """Build WrapOptions from these defaults plus non-None overrides."""
        values: Dict[str, Any] = {
            "width": self.LINEWRAP_WIDTH,
            "tab_size": self.LINEWRAP_TAB_SIZE,
            "placeholder": self.LINEWRAP_PLACEHOLDER,
            "break_long_words": self.LINEWRAP_BREAK_LONG_WORDS,
            "break_on_hyphens": self.LINEWRAP_BREAK_ON_HYPHENS,
            "fix_sentence_endings": self.LINEWRAP_FIX_SENTENCE_ENDINGS,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return WrapOptions(**values)


# Default settings - replaced by load_config() during CLI startup
SETTINGS = Settings()
