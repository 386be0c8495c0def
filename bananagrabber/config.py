"""Configuration handling for bananagrabber."""

import os
from dataclasses import dataclass, field
from typing import List, Optional

import yaml
from dotenv import load_dotenv

MAX_REDIRECTS = 10
CROSS_POST_RETRIES = 10


@dataclass
class BotConfig:
    """Chat bot adapter settings."""

    token: str = ""
    application_id: Optional[int] = None
    guild_id: Optional[int] = None
    command_name: str = "bananagrabber"


@dataclass
class Config:
    """Application configuration combining environment variables and YAML config."""

    user_agent: str = "bananagrabber/0.1"
    max_redirects: int = MAX_REDIRECTS
    cross_post_retries: int = CROSS_POST_RETRIES
    # None leaves requests unbounded; callers race resolution against their own timer
    request_timeout_sec: Optional[float] = None
    log_level: str = "WARNING"
    bot: BotConfig = field(default_factory=BotConfig)

    @classmethod
    def from_files(cls, config_path: Optional[str] = None, env_path: Optional[str] = None) -> "Config":
        """
        Load configuration from environment variables and an optional YAML file.

        Environment variables are read first, YAML values override them.

        Args:
            config_path: Path to YAML configuration file
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config instance with merged configuration

        Raises:
            ValueError: If a numeric environment variable is not a number
        """
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        config = cls()
        config.user_agent = os.getenv("BANANAGRABBER_USER_AGENT", config.user_agent)
        config.log_level = os.getenv("LOG_LEVEL", config.log_level)

        timeout = os.getenv("BANANAGRABBER_REQUEST_TIMEOUT")
        if timeout:
            config.request_timeout_sec = float(timeout)

        config.bot = BotConfig(
            token=os.getenv("DISCORD_TOKEN", ""),
            application_id=_optional_int("APPLICATION_ID"),
            guild_id=_optional_int("GUILD_ID"),
        )

        if config_path and os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as file:
                yaml_config = yaml.safe_load(file)

            if yaml_config:
                for key, value in yaml_config.items():
                    if key != "bot" and hasattr(config, key):
                        setattr(config, key, value)

                if "bot" in yaml_config and isinstance(yaml_config["bot"], dict):
                    for key, value in yaml_config["bot"].items():
                        if hasattr(config.bot, key):
                            setattr(config.bot, key, value)

        return config

    def validate(self) -> List[str]:
        """
        Validate the resolution settings.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.user_agent:
            errors.append("user_agent must not be empty")
        if self.max_redirects <= 0:
            errors.append("max_redirects must be greater than 0")
        if self.cross_post_retries <= 0:
            errors.append("cross_post_retries must be greater than 0")
        if self.request_timeout_sec is not None and self.request_timeout_sec <= 0:
            errors.append("request_timeout_sec must be greater than 0 when set")

        return errors

    def validate_bot(self) -> List[str]:
        """
        Validate the chat bot settings.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.bot.token:
            errors.append("Missing DISCORD_TOKEN in environment")
        if self.bot.application_id is None:
            errors.append("Missing APPLICATION_ID in environment")
        if self.bot.guild_id is None:
            errors.append("Missing GUILD_ID in environment")
        if not self.bot.command_name:
            errors.append("bot.command_name must not be empty")

        return errors


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")
