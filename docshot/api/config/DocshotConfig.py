"""Top-level docshot configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .DocsConfig import DocsConfig
from .EngineConfig import EngineConfig

# OPERATON_* variables as used in the toolkit .env file
ENGINE_ENV_OVERRIDES = {
    "OPERATON_REST_URL": "rest_url",
    "OPERATON_BASE_URL": "web_url",
    "OPERATON_USERNAME": "username",
    "OPERATON_PASSWORD": "password",
}


class DocshotConfig(BaseModel):
    """Top-level configuration for docshot."""

    model_config = ConfigDict(extra="forbid")

    docs: DocsConfig = Field(default_factory=DocsConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get docshot home directory based on DOCSHOT_HOME or default to ~/.docshot."""
        home_env = os.environ.get("DOCSHOT_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".docshot"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "DocshotConfig":
        """Load and validate config, then apply OPERATON_* environment overrides.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        raw: dict[str, Any] = {}
        if path.exists():
            try:
                with path.open() as fh:
                    raw = json.load(fh)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        engine_raw = dict(raw.get("engine", {}))
        for env_name, field_name in ENGINE_ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                engine_raw[field_name] = value
        if engine_raw:
            raw = {**raw, "engine": engine_raw}

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for display. The engine password is masked."""
        engine = self.engine.model_dump()
        engine["password"] = "***" if engine["password"] else ""
        return {
            "docs": self.docs.model_dump(),
            "engine": engine,
        }
