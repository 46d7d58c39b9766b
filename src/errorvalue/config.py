"""Configuration: frozen Config controlling development-mode behavior."""

from __future__ import annotations

from dataclasses import dataclass

from dotenv import load_dotenv

from errorvalue._dev_flags import (
    DEFAULT_DEVELOPMENT_VALUE,
    DEFAULT_ENVIRONMENT_VARIABLE,
    development_mode_enabled,
)
from errorvalue.errors import ConfigurationError

load_dotenv()


@dataclass(frozen=True)
class Config:
    """Immutable configuration for result values.

    When ``development_mode`` is *None* the flag is resolved from the
    environment each time it is needed, so deployments can flip it without
    rebuilding results.

    Example:
        config = Config(development_mode=True)
        result = Result(config=config)
        result.set(exception=exc)  # exception text is recorded
    """

    #: Explicit switch; *None* defers to ``environment_variable``.
    development_mode: bool | None = None
    environment_variable: str = DEFAULT_ENVIRONMENT_VARIABLE
    #: Compared exactly (case-sensitive) against the variable's value.
    development_value: str = DEFAULT_DEVELOPMENT_VALUE

    def __post_init__(self) -> None:
        """Validate the environment lookup settings."""
        if not self.environment_variable or not self.environment_variable.strip():
            raise ConfigurationError(
                "environment_variable must be a non-empty name",
                hint="Leave it unset to use ERRORVALUE_ENVIRONMENT.",
            )
        if not self.development_value:
            raise ConfigurationError(
                "development_value must be non-empty",
                hint="This is the exact value that marks a development deployment.",
            )

    def is_development(self) -> bool:
        """Return True when exception text may be added to messages."""
        return development_mode_enabled(
            override=self.development_mode,
            variable=self.environment_variable,
            expected=self.development_value,
        )

    @classmethod
    def from_env(
        cls,
        *,
        environment_variable: str = DEFAULT_ENVIRONMENT_VARIABLE,
        development_value: str = DEFAULT_DEVELOPMENT_VALUE,
    ) -> Config:
        """Snapshot the current environment into an explicit Config."""
        return cls(
            development_mode=development_mode_enabled(
                variable=environment_variable, expected=development_value
            ),
            environment_variable=environment_variable,
            development_value=development_value,
        )
