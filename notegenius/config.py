"""
Configuration for NoteGenius.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)

Env values are merged field by field: setting one variable overrides that
one field and leaves the rest of its section to YAML or the defaults.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class LLMConfig(BaseModel):
    """LLM provider configuration for the AI assistant."""

    provider: str = "ollama"  # ollama, openai
    model: str = "llama3.1:8b"
    base_url: str = "http://localhost:11434"
    api_key: str | None = None
    temperature: float = 0.7
    max_tokens: int = 1000
    timeout: float = 120.0
    system_prompt: str = (
        "You are NoteGenius AI, an assistant for a note-taking app. "
        "Provide helpful, accurate, and well-formatted responses."
    )


class EditorConfig(BaseModel):
    """Editor session configuration."""

    history_limit: int = Field(default=20, ge=1)
    words_per_minute: int = Field(default=200, ge=1)
    autosave_delay: float = Field(default=2.0, ge=0.0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: str | None = None  # no file sink unless set
    rotation: str = "10 MB"
    retention: str = "7 days"


# section -> field -> environment variable
ENV_VARS: dict[str, dict[str, str]] = {
    "llm": {
        "provider": "NOTEGENIUS_LLM_PROVIDER",
        "model": "NOTEGENIUS_LLM_MODEL",
        "base_url": "NOTEGENIUS_LLM_BASE_URL",
        "api_key": "NOTEGENIUS_LLM_API_KEY",
        "temperature": "NOTEGENIUS_LLM_TEMPERATURE",
        "max_tokens": "NOTEGENIUS_LLM_MAX_TOKENS",
        "timeout": "NOTEGENIUS_LLM_TIMEOUT",
        "system_prompt": "NOTEGENIUS_LLM_SYSTEM_PROMPT",
    },
    "editor": {
        "history_limit": "NOTEGENIUS_EDITOR_HISTORY_LIMIT",
        "words_per_minute": "NOTEGENIUS_EDITOR_WORDS_PER_MINUTE",
        "autosave_delay": "NOTEGENIUS_EDITOR_AUTOSAVE_DELAY",
    },
    "logging": {
        "level": "NOTEGENIUS_LOG_LEVEL",
        "file": "NOTEGENIUS_LOG_FILE",
        "rotation": "NOTEGENIUS_LOG_ROTATION",
        "retention": "NOTEGENIUS_LOG_RETENTION",
    },
}


class Config(BaseModel):
    """Main configuration."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @staticmethod
    def _load_env_file(env_file: str | Path | None = None) -> None:
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

    @staticmethod
    def _env_overrides() -> dict[str, dict[str, Any]]:
        """Explicitly set (non-empty) env values, grouped by section."""
        overrides: dict[str, dict[str, Any]] = {}
        for section, fields in ENV_VARS.items():
            values = {}
            for field, var in fields.items():
                value = os.getenv(var)
                if value is not None and value != "":
                    values[field] = value
            if values:
                overrides[section] = values
        return overrides

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults.
        Values are strings; pydantic converts them to the field types.

        Args:
            env_file: Optional path to .env file (default: .env in working directory)

        Returns:
            Config instance

        Environment variables (see ENV_VARS for the full list):
            NOTEGENIUS_LLM_PROVIDER: LLM provider (ollama, openai)
            NOTEGENIUS_LLM_MODEL: LLM model name
            NOTEGENIUS_LLM_API_KEY: LLM API key (for OpenAI)
            NOTEGENIUS_EDITOR_HISTORY_LIMIT: Undo snapshots kept per session
            NOTEGENIUS_EDITOR_WORDS_PER_MINUTE: Reading speed for reading time
            NOTEGENIUS_EDITOR_AUTOSAVE_DELAY: Auto-save debounce in seconds
            NOTEGENIUS_LOG_LEVEL: Log level
            NOTEGENIUS_LOG_FILE: Rotating log file path
        """
        cls._load_env_file(env_file)
        return cls(**cls._env_overrides())

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Each set env var replaces only its own field in the YAML section.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                data = yaml.safe_load(f) or {}
        else:
            data = {}

        cls._load_env_file(env_file)
        for section, values in cls._env_overrides().items():
            data[section] = {**(data.get(section) or {}), **values}

        return cls(**data)


default_config = Config()
