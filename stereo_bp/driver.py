import logging

from tqdm import tqdm

from .bp import iterate
from .config import BPConfig
from .decode import decode
from .init import initialize_grid

logger = logging.getLogger(__name__)


def run_bp(grid, config, progress=False):
    """
    Loopy min-sum BP: config.iterations x (R, L, U, D sweeps, decode).
    Messages are updated in place, never normalised.
    Returns the energy after each iteration.
    """
    smooth = grid.smoothness()
    K = config.iterations
    energies = []
    for k in tqdm(range(K), desc="BP", disable=not progress):
        iterate(grid, smooth)
        energy = decode(grid, smooth)
        energies.append(energy)
        logger.info("iteration %d/%d, energy = %d", k + 1, K, energy)
    return energies


def compute_disparity(left, right, config=None, progress=False):
    """
    Full pipeline for a rectified grayscale pair.
    Returns (grid, energies); grid.best_label holds the MAP labels.
    """
    config = (config or BPConfig()).validate()
    grid = initialize_grid(left, right, config)
    energies = run_bp(grid, config, progress=progress)
    if not energies:
        # no iterations: labels come from the data term alone
        decode(grid)
    return grid, energies
