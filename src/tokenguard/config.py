from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_TOKEN_MATCH_MARGIN = 2

# Host option names accepted by from_options, mapped to GuardConfig fields.
_OPTION_ALIASES = {
    "tokens_file": "tokens_file",
    "tokensFilePath": "tokens_file",
    "token_match_margin": "token_match_margin",
    "tokenMatchMargin": "token_match_margin",
    "fix": "fix",
}


class ConfigError(ValueError):
    """Raised when host options are missing or invalid."""


@dataclass(frozen=True)
class GuardConfig:
    tokens_file: str
    token_match_margin: float = DEFAULT_TOKEN_MATCH_MARGIN
    fix: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.tokens_file, str) or not self.tokens_file:
            raise ConfigError("tokens_file must be a non-empty string")
        margin = self.token_match_margin
        if isinstance(margin, bool) or not isinstance(margin, (int, float)) or margin < 0:
            raise ConfigError(
                f"token_match_margin must be a non-negative number, got {margin!r}"
            )
        if not isinstance(self.fix, bool):
            raise ConfigError(f"fix must be a boolean, got {self.fix!r}")

    @classmethod
    def from_options(cls, options: Mapping[str, object]) -> GuardConfig:
        """Build a config from host options, accepting camelCase names."""
        kwargs: dict[str, object] = {}
        for key, value in options.items():
            if key not in _OPTION_ALIASES:
                raise ConfigError(f"Unknown option: {key!r}")
            kwargs[_OPTION_ALIASES[key]] = value
        if "tokens_file" not in kwargs:
            raise ConfigError("Missing required option: tokens_file")
        return cls(**kwargs)  # type: ignore[arg-type]
