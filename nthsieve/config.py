"""
Engine configuration, read once at backend resolution.

Environment variables:
- DISABLE_MATRYOSHKA_NATIVE    disables accelerated backends in every library
                               following the matryoshka fallback pattern
- DISABLE_NTHSIEVE_NATIVE      disables them for nthsieve only
- DEBUG_MATRYOSHKA             report backend loading on stderr
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DISABLE_ALL_VAR = "DISABLE_MATRYOSHKA_NATIVE"
DISABLE_COMPONENT_VAR = "DISABLE_NTHSIEVE_NATIVE"
DEBUG_VAR = "DEBUG_MATRYOSHKA"


def env_flag(environ: Mapping[str, str], name: str) -> bool:
    """True if `name` is present, whatever its value (even "" or "0")."""
    return name in environ


@dataclass(frozen=True)
class EngineConfig:
    disable_all: bool = False
    disable_component: bool = False
    debug: bool = False

    @property
    def accel_disabled(self) -> bool:
        """Either flag forces the baseline backend."""
        return self.disable_all or self.disable_component

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        if environ is None:
            environ = os.environ
        return cls(
            disable_all=env_flag(environ, DISABLE_ALL_VAR),
            disable_component=env_flag(environ, DISABLE_COMPONENT_VAR),
            debug=env_flag(environ, DEBUG_VAR),
        )
