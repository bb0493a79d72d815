"""
What the session draws, and a surface that only remembers it
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple

from space_game.entities import Kind


@dataclass(frozen=True)
class Hud:
    """
    Values shown on top of the frame
    """

    health: int
    score: int
    high_score: int


class Surface(Protocol):
    """
    Drawing capabilities the session needs from its host
    """

    def begin_frame(self) -> None:
        """Start drawing a new frame"""

    def draw_sprite(self, kind: Kind, x: float, y: float) -> None:
        """Draw the visual of ``kind`` centred at (x, y)"""

    def draw_backdrop(self, kind: Kind, top: float) -> None:
        """Draw the visual of ``kind`` with its top-left corner at (0, top)"""

    def draw_hud(self, hud: Hud) -> None:
        """Draw the health bar, the score and the high score"""

    def draw_caption(self, text: str) -> None:
        """Draw a big centred caption"""


@dataclass
class Frame:
    """
    Everything drawn between two ``begin_frame`` calls
    """

    sprites: List[Tuple[Kind, Tuple[float, float]]] = field(default_factory=list)
    backdrops: List[float] = field(default_factory=list)
    hud: Optional[Hud] = None
    captions: List[str] = field(default_factory=list)

    def count(self, kind: Kind) -> int:
        return sum(1 for drawn, _ in self.sprites if drawn is kind)


class RecordingSurface:
    """
    Headless surface that keeps every frame it was asked to draw
    """

    def __init__(self) -> None:
        self.frames: List[Frame] = []

    @property
    def last(self) -> Frame:
        if not self.frames:
            self.frames.append(Frame())
        return self.frames[-1]

    def begin_frame(self) -> None:
        self.frames.append(Frame())

    def draw_sprite(self, kind: Kind, x: float, y: float) -> None:
        self.last.sprites.append((kind, (x, y)))

    def draw_backdrop(self, kind: Kind, top: float) -> None:
        self.last.backdrops.append(top)

    def draw_hud(self, hud: Hud) -> None:
        self.last.hud = hud

    def draw_caption(self, text: str) -> None:
        self.last.captions.append(text)
