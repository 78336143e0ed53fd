"""Sprite-sheet frame animation."""

from typing import Callable, NamedTuple, Optional

from villagedefense.timer import Timer


class FrameRect(NamedTuple):
    x: int
    y: int
    w: int
    h: int


class Animation:
    """Steps through frames of a sprite sheet at a fixed interval."""

    def __init__(self) -> None:
        self.loop = True
        self.on_finish: Optional[Callable[[], None]] = None
        self.frames: list = []
        self.frame_width = 0
        self.frame_height = 0
        self.idx_frame = 0
        self._timer = Timer(one_shot=False, callback=self._advance)

    @property
    def interval(self) -> float:
        return self._timer.wait_time

    @interval.setter
    def interval(self, value: float) -> None:
        self._timer.wait_time = value

    def _advance(self) -> None:
        self.idx_frame += 1
        if self.idx_frame >= len(self.frames):
            self.idx_frame = 0 if self.loop else max(len(self.frames) - 1, 0)
            if not self.loop and self.on_finish is not None:
                self.on_finish()

    def reset(self) -> None:
        self.idx_frame = 0
        self._timer.restart()

    def set_frame_data(self, texture_size, num_h: int, num_v: int, idx_list) -> None:
        """Cut a ``num_h`` x ``num_v`` sheet of ``texture_size`` into the listed frames."""
        width, height = texture_size
        self.frame_width = width // num_h
        self.frame_height = height // num_v
        self.frames = [
            FrameRect(
                (idx % num_h) * self.frame_width,
                (idx // num_h) * self.frame_height,
                self.frame_width,
                self.frame_height,
            )
            for idx in idx_list
        ]

    def on_update(self, delta: float) -> None:
        self._timer.on_update(delta)

    def current_frame(self) -> FrameRect:
        return self.frames[self.idx_frame]