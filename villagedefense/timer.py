"""A countdown timer driven by frame deltas."""

from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class Timer:
    """Fires ``callback`` each time ``wait_time`` seconds have accumulated.

    A one-shot timer fires only once until it is restarted. At most one
    firing happens per update, however large the delta.
    """

    wait_time: float = 0.0
    one_shot: bool = True
    callback: Optional[Callable[[], None]] = None
    paused: bool = False
    pass_time: float = field(default=0.0, init=False)
    shotted: bool = field(default=False, init=False)

    def restart(self) -> None:
        """Clear the elapsed time and re-arm a one-shot timer."""
        self.pass_time = 0.0
        self.shotted = False

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def on_update(self, delta: float) -> None:
        """Advance the timer by ``delta`` seconds."""
        if self.paused:
            return
        self.pass_time += delta
        if self.pass_time >= self.wait_time:
            can_shot = not self.one_shot or not self.shotted
            self.shotted = True
            if can_shot and self.callback is not None:
                self.callback()
            self.pass_time -= self.wait_time