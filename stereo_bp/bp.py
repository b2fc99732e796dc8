from .grid import Direction, OFFSETS


# order of the sweeps within one iteration
SWEEP_ORDER = (Direction.RIGHT, Direction.LEFT, Direction.UP, Direction.DOWN)


def _cavity(direction):
    # every slot except the one holding what the target neighbour sent us
    return [s for s in Direction if s != direction]


def _min_convolve(h, smooth):
    """
    m[..., i] = min_j (S[i, j] + h[..., j])
    h: (..., L) summed incoming costs, smooth: (L, L)
    """
    return (smooth + h[..., None, :]).min(axis=-1)


def send_message(grid, x, y, direction, smooth):
    """Single min-sum update: pixel (x, y) sends to its neighbour in `direction`."""
    assert direction in OFFSETS, direction
    dx, dy, slot = OFFSETS[direction]
    src = grid.index(x, y)
    dst = grid.index(x + dx, y + dy)
    h = sum(grid.slot(s)[src] for s in _cavity(direction))
    grid.slot(slot)[dst] = _min_convolve(h, smooth)


def _positions(n, step):
    # sources whose neighbour exists, in the order messages travel
    if step > 0:
        return range(0, n - 1)
    return range(n - 1, 0, -1)


def sweep(grid, direction, smooth=None):
    """
    One directional pass over the grid.
    Horizontal sweeps update a whole column per step, vertical sweeps a whole
    row; each step depends on the previous one along the sweep axis only.
    """
    assert direction in OFFSETS, direction
    if smooth is None:
        smooth = grid.smoothness()
    dx, dy, slot = OFFSETS[direction]
    keep = _cavity(direction)
    msg = grid.msg

    if dx:
        for x in _positions(grid.width, dx):
            h = msg[keep, :, x, :].sum(axis=0)  # (H, L)
            msg[slot, :, x + dx, :] = _min_convolve(h, smooth)
    else:
        for y in _positions(grid.height, dy):
            h = msg[keep, y, :, :].sum(axis=0)  # (W, L)
            msg[slot, y + dy, :, :] = _min_convolve(h, smooth)


def iterate(grid, smooth=None):
    """R, L, U, D sweeps."""
    if smooth is None:
        smooth = grid.smoothness()
    for d in SWEEP_ORDER:
        sweep(grid, d, smooth)
