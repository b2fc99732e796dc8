import numpy as np
import pytest

from stereo_bp.config import BPConfig
from stereo_bp.errors import DimensionTooSmall, InvalidInput
from stereo_bp.grid import NEIGHBOURS
from stereo_bp.init import initialize_grid
from stereo_bp.model import data_cost


def test_default_config_matches_reference():
    cfg = BPConfig()
    assert (cfg.labels, cfg.iterations, cfg.lam, cfg.trunc, cfg.radius) == (16, 40, 20, 2, 2)
    assert cfg.active_border == 16
    assert BPConfig(labels=1).active_border == 2
    assert cfg.window_area == 25


def test_initial_state(random_pair):
    left, right = random_pair
    grid = initialize_grid(left, right, BPConfig(labels=4))
    assert (grid.width, grid.height, grid.labels) == (32, 24, 4)
    assert len(grid) == 32 * 24
    for s in NEIGHBOURS:
        assert not np.any(grid.msg[s])
    data = grid.data
    assert not np.any(data[:4]) and not np.any(data[-4:])
    assert not np.any(data[:, :4]) and not np.any(data[:, -4:])
    for (x, y) in [(4, 4), (10, 7), (27, 19)]:
        for l in range(4):
            assert data[y, x, l] == data_cost(left, right, x, y, l)


def test_accepts_wider_integer_bytes(random_pair):
    left, right = random_pair
    grid = initialize_grid(left.astype(np.int32), right.astype(np.uint16), BPConfig(labels=4))
    expected = initialize_grid(left, right, BPConfig(labels=4))
    assert np.array_equal(grid.data, expected.data)


@pytest.mark.parametrize("left,right", [
    (np.full((40, 40), 300, dtype=np.int32), np.full((40, 40), 44, dtype=np.int32)),
    (np.full((40, 40), -1, dtype=np.int16), np.zeros((40, 40), dtype=np.int16)),
    (np.zeros((40, 40), dtype=np.float64), np.zeros((40, 40), dtype=np.float64)),
])
def test_rejects_non_byte_values(left, right):
    with pytest.raises(InvalidInput):
        initialize_grid(left, right, BPConfig(labels=4))


@pytest.mark.parametrize("left,right", [
    (np.zeros((0, 0), dtype=np.uint8), np.zeros((0, 0), dtype=np.uint8)),
    (np.zeros((40, 40), dtype=np.uint8), np.zeros((40, 41), dtype=np.uint8)),
    (np.zeros((40, 40, 3), dtype=np.uint8), np.zeros((40, 40, 3), dtype=np.uint8)),
    (None, np.zeros((40, 40), dtype=np.uint8)),
])
def test_invalid_images(left, right):
    with pytest.raises(InvalidInput):
        initialize_grid(left, right, BPConfig(labels=4))


@pytest.mark.parametrize("cfg", [
    BPConfig(labels=8, border=7),
    BPConfig(labels=2, radius=3, border=2),
    BPConfig(labels=0),
    BPConfig(labels=257),
    BPConfig(iterations=-1),
])
def test_invalid_config(cfg):
    img = np.zeros((64, 64), dtype=np.uint8)
    with pytest.raises(InvalidInput):
        initialize_grid(img, img, cfg)


def test_too_small_for_border():
    img = np.zeros((16, 40), dtype=np.uint8)
    with pytest.raises(DimensionTooSmall):
        initialize_grid(img, img, BPConfig(labels=8))
    grid = initialize_grid(np.zeros((17, 17), dtype=np.uint8), np.zeros((17, 17), dtype=np.uint8),
                           BPConfig(labels=8))
    assert grid.shape == (17, 17)


def test_grid_carries_configured_prior(random_pair):
    left, right = random_pair
    grid = initialize_grid(left, right, BPConfig(labels=4, lam=7, trunc=1))
    assert (grid.lam, grid.trunc) == (7, 1)
    assert grid.smoothness().max() == 7


def test_max_labels_accepted():
    assert BPConfig(labels=256).validate().labels == 256
