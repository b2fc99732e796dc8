from enum import IntEnum

import numpy as np

from .model import COST_DTYPE, smoothness_table


class Direction(IntEnum):
    """
    Message slot of a pixel. LEFT..DOWN hold the message received from that
    neighbour; DATA holds the cached data cost. As a sweep direction,
    LEFT..DOWN name the neighbour a message is sent to.
    """
    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3
    DATA = 4


NEIGHBOURS = (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN)

# direction -> (dx, dy, slot written at the neighbour)
OFFSETS = {
    Direction.LEFT: (-1, 0, Direction.RIGHT),
    Direction.RIGHT: (1, 0, Direction.LEFT),
    Direction.UP: (0, -1, Direction.DOWN),
    Direction.DOWN: (0, 1, Direction.UP),
}


class MRFGrid:
    """
    Dense W x H grid of pixels, row-major (index y*W + x).
    msg: (5, H, W, L) message buffers, each slot one contiguous block.
    best_label: (H, W), -1 until the first decode.
    lam, trunc: smoothness prior the grid is solved under.
    """

    def __init__(self, width, height, labels, lam=20, trunc=2):
        self.width = width
        self.height = height
        self.labels = labels
        self.lam = lam
        self.trunc = trunc
        self.msg = np.zeros((len(Direction), height, width, labels), dtype=COST_DTYPE)
        self.best_label = np.full((height, width), -1, dtype=np.int64)

    def __len__(self):
        return self.width * self.height

    @property
    def shape(self):
        return self.height, self.width

    @property
    def data(self):
        return self.msg[Direction.DATA]

    @property
    def decoded(self):
        return bool(self.best_label.min(initial=0) >= 0)

    def smoothness(self):
        return smoothness_table(self.labels, lam=self.lam, trunc=self.trunc)

    def index(self, x, y):
        assert 0 <= x < self.width and 0 <= y < self.height, (x, y)
        return y * self.width + x

    def slot(self, s):
        # (W*H, L) view in row-major pixel order
        return self.msg[s].reshape(len(self), self.labels)

    def message(self, x, y, s):
        return self.slot(s)[self.index(x, y)]
