"""Validated run configuration."""

import os
from dataclasses import dataclass

PREFIX_ENV = "PREFIX_RUN_PREFIX"


@dataclass(frozen=True)
class RunConfig:
    command: str
    prefix: bytes = b""

    @classmethod
    def from_options(cls, command: str | None, prefix: str | None = None) -> "RunConfig":
        """Build a config from raw option values.

        An empty prefix means no transform. The prefix is encoded the way the
        OS hands arguments to us, so undecodable bytes survive the round trip.
        """
        if not command:
            raise ValueError("--command is required")
        return cls(command=command, prefix=os.fsencode(prefix) if prefix else b"")
