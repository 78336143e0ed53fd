"""The village home that enemies try to reach."""

from dataclasses import dataclass
from typing import Callable, Optional

from villagedefense.config import GameConfig


@dataclass
class Home:
    """Hit points of the home; reaching zero ends the game."""

    config: GameConfig
    hp: float = 10.0
    on_hurt: Optional[Callable[[], None]] = None

    def decrease_hp(self, val: float) -> None:
        """Lose ``val`` hit points; at zero the game is over."""
        self.hp -= val
        if self.hp <= 0:
            self.hp = 0
            self.config.is_game_over = True
        if self.on_hurt is not None:
            self.on_hurt()