# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.

"""hashwrap settings module."""

import logging
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from .._logging import LogLevelType, get_log_level, setup_logging
from ..hash import Hash
from ..hashing.blowfish import (
    MAX_WORK_FACTOR,
    MIN_WORK_FACTOR,
    BlowfishHasher,
)
from ._common import ENV_PREFIX, load_dot_env
from ._hashing import get_pepper, get_secret, get_work_factor

LOG = logging.getLogger(__name__)


def _as_secret(value: Optional[str]) -> Optional[SecretStr]:
    if value:
        return SecretStr(value)
    return None


class HashSettings(BaseSettings):
    """Settings class."""

    work_factor: Annotated[
        int, Field(ge=MIN_WORK_FACTOR, le=MAX_WORK_FACTOR)
    ] = get_work_factor()
    secret: Optional[SecretStr] = _as_secret(get_secret())
    pepper: Optional[SecretStr] = _as_secret(get_pepper())
    log_level: LogLevelType = get_log_level()

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.upper()
        return value

    @classmethod
    def load(cls) -> "HashSettings":
        """Load the settings.

        Returns
        -------
        HashSettings
            The settings instance
        """
        if load_dot_env():
            LOG.debug("Loaded settings from .env")
        return cls()

    def configure_logging(self) -> None:
        """Configure the package loggers with the configured log level."""
        setup_logging(self.log_level)

    def create_hasher(self) -> BlowfishHasher:
        """Create a hasher with the configured work factor.

        Returns
        -------
        BlowfishHasher
            The hasher
        """
        return BlowfishHasher(self.work_factor)

    def create_hash(self) -> Hash:
        """Create a hash facade from the settings.

        Returns
        -------
        Hash
            The facade, wrapping a new hasher
        """
        return Hash(
            self.create_hasher(),
            self.secret.get_secret_value() if self.secret else None,
            pepper=self.pepper.get_secret_value() if self.pepper else None,
        )
