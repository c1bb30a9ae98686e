from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_WIDTH = 264
DEFAULT_HEIGHT = 176
# Replace REPLACEME with the agent id shown in the Electric Imp IDE
DEFAULT_AGENT_URL = "https://agent.electricimp.com/REPLACEME/image"


@dataclass(frozen=True)
class DisplayConfig:
    """Target panel geometry, orientation and endpoint for one push."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    agent_url: str = DEFAULT_AGENT_URL
    fit_to_canvas: bool = False
    rotate: bool = True
    invert: bool = False

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}")
        if not self.agent_url:
            raise ValueError("Agent URL must not be empty")

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def bytes_per_row(self) -> int:
        return (self.width + 7) // 8

    @property
    def buffer_size(self) -> int:
        return self.height * self.bytes_per_row
