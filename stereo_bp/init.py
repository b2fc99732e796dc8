import logging

import numpy as np

from .config import BPConfig
from .errors import DimensionTooSmall, InvalidInput
from .grid import MRFGrid
from .model import data_cost_volume

logger = logging.getLogger(__name__)


def _as_gray_uint8(img, name):
    if img is None:
        raise InvalidInput(f"{name} image is missing")
    img = np.asarray(img)
    if img.ndim != 2:
        raise InvalidInput(f"{name} image must be single-channel 2D, got shape {img.shape}")
    if img.size == 0:
        raise InvalidInput(f"{name} image is empty")
    if img.dtype.kind not in "ui":
        raise InvalidInput(f"{name} image must hold 8-bit integers, got dtype {img.dtype}")
    if img.min() < 0 or img.max() > 255:
        raise InvalidInput(f"{name} image values outside [0, 255]")
    return np.ascontiguousarray(img.astype(np.uint8))


def initialize_grid(left, right, config=None):
    """
    Allocate the MRF for a rectified pair and cache the data term.
    left, right: (H, W) grayscale arrays of identical size
    All messages start at zero; border pixels keep a zero data slot.
    """
    config = (config or BPConfig()).validate()
    left = _as_gray_uint8(left, "left")
    right = _as_gray_uint8(right, "right")
    if left.shape != right.shape:
        raise InvalidInput(f"image sizes differ: {left.shape} vs {right.shape}")

    H, W = left.shape
    B = config.active_border
    if H < 2 * B + 1 or W < 2 * B + 1:
        raise DimensionTooSmall(f"{W}x{H} image has no interior with border {B}")

    grid = MRFGrid(W, H, config.labels, lam=config.lam, trunc=config.trunc)
    grid.data[...] = data_cost_volume(left, right, L=config.labels, radius=config.radius, border=B)
    logger.debug("initialised %dx%d grid, %d labels, border %d", W, H, config.labels, B)
    return grid
