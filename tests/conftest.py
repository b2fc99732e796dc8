import numpy as np
import pytest

from stereo_bp.config import BPConfig


def textured_pair(H, W, shift, seed=0):
    """
    Random-texture pair with left[y, x] = right[y, x - d(x)].
    shift: int disparity, or callable x -> disparity
    """
    rng = np.random.default_rng(seed)
    right = rng.integers(0, 256, size=(H, W), dtype=np.uint8)
    xs = np.arange(W)
    d = np.array([shift(x) for x in xs]) if callable(shift) else np.full(W, shift)
    left = right[:, np.clip(xs - d, 0, W - 1)]
    return np.ascontiguousarray(left), right


@pytest.fixture
def small_config():
    return BPConfig(labels=8, iterations=3)


@pytest.fixture
def random_pair():
    rng = np.random.default_rng(7)
    left = rng.integers(0, 256, size=(24, 32), dtype=np.uint8)
    right = rng.integers(0, 256, size=(24, 32), dtype=np.uint8)
    return left, right
