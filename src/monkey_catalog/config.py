"""Configuration for the monkey catalog."""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field

DEFAULT_TOOL_COMMAND = "docker"
DEFAULT_TOOL_ARGS = ("run", "-i", "--rm", "jamesmontemagno/monkeymcp")


def _args_from_env() -> list[str]:
    raw = os.environ.get("MONKEY_MCP_ARGS")
    if raw is None:
        return list(DEFAULT_TOOL_ARGS)
    return shlex.split(raw)


@dataclass
class RetrieverConfig:
    """
    How to launch the external tool server.

    Defaults can be set via environment variables (MONKEY_MCP_*). The
    command is executed directly, never through a shell.
    """
    command: str = field(
        default_factory=lambda: os.environ.get("MONKEY_MCP_COMMAND", DEFAULT_TOOL_COMMAND)
    )
    args: list[str] = field(default_factory=_args_from_env)

    # Seconds to wait for the child to finish (0 = wait forever)
    timeout_seconds: float = field(
        default_factory=lambda: float(os.environ.get("MONKEY_MCP_TIMEOUT", "60"))
    )

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.args]


@dataclass
class CatalogConfig:
    """Catalog configuration."""
    # Path to a dataset file (YAML or JSON); None = built-in dataset
    definition_file: str | None = None


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Config:
    """Main configuration container."""
    retriever: RetrieverConfig = field(default_factory=RetrieverConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> Config:
        """Create config from dictionary."""
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")
        for section in ("retriever", "catalog", "logging"):
            if not isinstance(data.get(section, {}), dict):
                raise ValueError(f"Config section '{section}' must be a mapping")
        return cls(
            retriever=RetrieverConfig(**data.get("retriever", {})),
            catalog=CatalogConfig(**data.get("catalog", {})),
            logging=LoggingConfig(**data.get("logging", {})),
        )

    @classmethod
    def from_yaml(cls, path: str) -> Config:
        """Load config from YAML file."""
        import yaml
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_json(cls, path: str) -> Config:
        """Load config from JSON file."""
        import json
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)
