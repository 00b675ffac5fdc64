"""Server configuration."""

import random
from typing import Literal, Optional

from pydantic import BaseModel, Field

from warriorapi.config import (
    DEFAULT_DEBUG,
    DEFAULT_HOST,
    DEFAULT_ID_POLICY,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_RANDOM_SEED,
)
from warriorapi.engine.critical import CriticalRoller


class ServerConfig(BaseModel):
    """HTTP server and store configuration."""

    host: str = Field(default=DEFAULT_HOST, description="Interface to bind")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, description="Port to listen on")
    debug: bool = Field(default=DEFAULT_DEBUG, description="Run Flask in debug mode")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Root logging level")
    id_policy: Literal["client_or_next", "server"] = Field(
        default=DEFAULT_ID_POLICY, description="How warrior ids are assigned on create"
    )
    random_seed: Optional[int] = Field(
        default=DEFAULT_RANDOM_SEED,
        description="Seed for critical hit rolls (None uses the process-wide generator)",
    )

    def make_random(self):
        """Get the random source for critical rolls, seeded if configured."""
        if self.random_seed is not None:
            return random.Random(self.random_seed)
        return random

    def make_roller(self) -> CriticalRoller:
        """Build the process-wide critical hit roller."""
        return CriticalRoller(self.make_random())
