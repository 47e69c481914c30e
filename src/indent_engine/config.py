"""Engine configuration resolved from keyword arguments or the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Mapping, Optional

from indent_engine.runtime.telemetry import ENV_PREFIX

SelectionPolicy = Literal["strict", "clamp"]

SELECTION_POLICIES: tuple[str, ...] = ("strict", "clamp")


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Options shared by the engine facade and host adapters.

    ``selection_policy`` decides what happens when a host hands over offsets
    outside the buffer: ``"strict"`` raises ``InvalidSelection`` and
    ``"clamp"`` pulls the offsets back into range.
    """

    selection_policy: SelectionPolicy = "strict"
    logger_name: str = "indent_engine.engine"

    def __post_init__(self) -> None:
        if self.selection_policy not in SELECTION_POLICIES:
            raise ValueError(
                f"selection_policy must be one of {SELECTION_POLICIES}, "
                f"got '{self.selection_policy}'"
            )
        if not self.logger_name:
            raise ValueError("logger_name cannot be empty")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        env = os.environ if environ is None else environ
        policy = env.get(f"{ENV_PREFIX}SELECTION_POLICY", "strict").strip().lower()
        return cls(selection_policy=policy)  # type: ignore[arg-type]


__all__ = ["EngineConfig", "SelectionPolicy", "SELECTION_POLICIES"]
