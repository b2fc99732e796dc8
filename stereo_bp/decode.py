import numpy as np


def beliefs_from_messages(grid):
    # data term + all four incoming messages, (H, W, L)
    return grid.msg.sum(axis=0)


def map_from_beliefs(beliefs):
    # argmin keeps the smallest label on ties
    return beliefs.argmin(axis=-1)


def labeling_energy(data, labels, smooth):
    """
    data: (H, W, L) data costs, labels: (H, W) label map, smooth: (L, L)
    Sum of data costs plus one smoothness term per directed 4-neighbour edge,
    i.e. each undirected edge counted from both endpoints.
    """
    labels = np.asarray(labels, dtype=np.int64)
    S = smooth.astype(np.int64)
    energy = int(np.take_along_axis(data, labels[..., None], axis=-1).sum())
    energy += 2 * int(S[labels[:, :-1], labels[:, 1:]].sum())
    energy += 2 * int(S[labels[:-1, :], labels[1:, :]].sum())
    return energy


def decode(grid, smooth=None):
    """MAP labels into grid.best_label; returns the energy of that labelling."""
    if smooth is None:
        smooth = grid.smoothness()
    grid.best_label[...] = map_from_beliefs(beliefs_from_messages(grid))
    return labeling_energy(grid.data, grid.best_label, smooth)


def disparity_map(grid, border):
    """(H, W) uint8 labels with the border zeroed."""
    assert grid.decoded, "decode() has not run"
    H, W = grid.shape
    out = np.zeros((H, W), dtype=np.uint8)
    out[border:H - border, border:W - border] = grid.best_label[border:H - border, border:W - border]
    return out


def render_disparity(labels, L=16):
    # stretch labels over the 8-bit range so the map is visible
    return (labels.astype(np.int64) * (256 // L)).clip(0, 255).astype(np.uint8)
