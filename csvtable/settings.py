"""
Environment-driven encoder configuration.

Reads ``CSVTABLE_*`` variables (or a ``.env`` file) and builds an
``EncoderConfiguration`` from them. ``DEFAULT_CONFIGURATION`` is never
touched; call ``load_configuration()`` and pass the result to a ``Table``.
"""
import logging
from typing import Literal, Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .configuration import (
    BoolEncodingStrategy,
    BoolStrategyKind,
    DateEncodingStrategy,
    EncoderConfiguration,
)

logger = logging.getLogger(__name__)


class EncoderSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CSVTABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Dates: custom functions can't come from the environment
    date_strategy: Literal["iso8601", "deferred_to_date", "formatted"] = "iso8601"
    date_format: Optional[str] = None  # strftime pattern, for "formatted"

    # Booleans
    bool_strategy: BoolStrategyKind = BoolStrategyKind.TRUE_FALSE
    bool_true: Optional[str] = None  # for "custom"
    bool_false: Optional[str] = None

    @model_validator(mode="after")
    def _check_payloads(self) -> "EncoderSettings":
        if self.date_strategy == "formatted" and not self.date_format:
            raise ValueError("CSVTABLE_DATE_FORMAT is required when CSVTABLE_DATE_STRATEGY=formatted")
        if self.bool_strategy is BoolStrategyKind.CUSTOM and (
            self.bool_true is None or self.bool_false is None
        ):
            raise ValueError(
                "CSVTABLE_BOOL_TRUE and CSVTABLE_BOOL_FALSE are required when CSVTABLE_BOOL_STRATEGY=custom"
            )
        return self

    def date_encoding_strategy(self) -> DateEncodingStrategy:
        if self.date_strategy == "formatted":
            return DateEncodingStrategy.formatted(self.date_format)
        if self.date_strategy == "deferred_to_date":
            return DateEncodingStrategy.deferred_to_date()
        return DateEncodingStrategy.iso8601()

    def bool_encoding_strategy(self) -> BoolEncodingStrategy:
        if self.bool_strategy is BoolStrategyKind.CUSTOM:
            return BoolEncodingStrategy.custom(self.bool_true, self.bool_false)
        return BoolEncodingStrategy(kind=self.bool_strategy)

    def to_configuration(self) -> EncoderConfiguration:
        return EncoderConfiguration(
            date_strategy=self.date_encoding_strategy(),
            bool_strategy=self.bool_encoding_strategy(),
        )


def load_configuration(**overrides) -> EncoderConfiguration:
    """
    Build an ``EncoderConfiguration`` from the environment.

    Keyword arguments override environment values, using the
    ``EncoderSettings`` field names (``date_strategy="deferred_to_date"``).

    Raises:
        pydantic.ValidationError: If a strategy name is unknown or its
            companion values are missing
    """
    settings = EncoderSettings(**overrides)
    configuration = settings.to_configuration()
    logger.debug("Loaded encoder configuration: %s", configuration.to_dict())
    return configuration
