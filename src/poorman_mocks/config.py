"""
Mock configuration.

MockConfig controls how strictly dispatch checks the arguments a member
forwards to its configured behaviors:
- check_arguments: validate arguments against the behavior's contract
- strict_none: None only satisfies nullable (Optional) parameters
- max_arity: cap on how many parameters a behavior may declare (None = no cap)

Defaults can be overridden per process through POORMAN_MOCKS_* variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConstructionError


ENV_PREFIX = "POORMAN_MOCKS_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class MockConfig:
    """Configuration shared by a mock's configuration API and dispatcher."""

    check_arguments: bool = True
    strict_none: bool = True
    max_arity: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_arity is not None and self.max_arity < 0:
            raise ConstructionError(
                f"max_arity must not be negative, got {self.max_arity}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MockConfig":
        """Build a config from POORMAN_MOCKS_* environment variables."""
        env = os.environ if environ is None else environ
        config = cls()

        check = env.get(f"{ENV_PREFIX}CHECK_ARGUMENTS")
        if check is not None:
            config.check_arguments = _parse_bool("CHECK_ARGUMENTS", check)

        strict = env.get(f"{ENV_PREFIX}STRICT_NONE")
        if strict is not None:
            config.strict_none = _parse_bool("STRICT_NONE", strict)

        arity = env.get(f"{ENV_PREFIX}MAX_ARITY")
        if arity is not None and arity.strip():
            try:
                config.max_arity = int(arity)
            except ValueError:
                raise ConstructionError(
                    f"{ENV_PREFIX}MAX_ARITY must be an integer, got {arity!r}"
                ) from None
            # Re-run range checks on the parsed value
            config.__post_init__()

        return config


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConstructionError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")
