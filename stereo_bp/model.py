import numpy as np
import cv2

# unsigned, wide enough for unnormalised min-sum messages
COST_DTYPE = np.uint64


def build_label_space(L=16):
    # labels 0..L-1 (integer disparities)
    return np.arange(L, dtype=np.int64)


def smooth_cost(i, j, lam=20, trunc=2):
    return lam * min(abs(i - j), trunc)


def smoothness_table(L=16, lam=20, trunc=2):
    """
    S[i, j] = lam * min(|i - j|, trunc), shape (L, L).
    Symmetric, zero on the diagonal, bounded by lam * trunc.
    """
    labels = build_label_space(L)
    d = np.abs(labels[:, None] - labels[None, :])
    return (lam * np.minimum(d, trunc)).astype(COST_DTYPE)


def data_cost(left, right, x, y, label, radius=2):
    """
    Average absolute difference between the (2r+1)^2 window centred at (x, y)
    in the left image and at (x - label, y) in the right image (integer division).
    Right-image columns left of 0 are clamped to column 0.
    """
    H, W = left.shape
    assert radius <= y < H - radius and radius <= x < W - radius, (x, y)
    rows = slice(y - radius, y + radius + 1)
    cols = np.arange(x - radius, x + radius + 1)
    a = left[rows, x - radius:x + radius + 1].astype(np.int32)
    b = right[rows][:, np.clip(cols - label, 0, W - 1)].astype(np.int32)
    return int(np.abs(a - b).sum()) // (2 * radius + 1) ** 2


def data_cost_volume(left, right, L=16, radius=2, border=16):
    """
    left, right: (H, W) uint8 grayscale pair
    returns D: (H, W, L), D[y, x, l] = data_cost(left, right, x, y, l)
    on the interior [border, H-border) x [border, W-border), zero elsewhere.
    Window sums come from an integral image of |left - shifted right|.
    """
    H, W = left.shape
    D = np.zeros((H, W, L), dtype=COST_DTYPE)
    if H <= 2 * border or W <= 2 * border:
        return D

    n = 2 * radius + 1
    pad = L - 1 + radius
    right_p = cv2.copyMakeBorder(right, 0, 0, pad, 0, cv2.BORDER_REPLICATE)
    # window sum at top-left (i, j) covers centre (i + radius, j + radius)
    ys = slice(border - radius, H - border - radius)
    xs = slice(border - radius, W - border - radius)
    for l in range(L):
        shifted = np.ascontiguousarray(right_p[:, pad - l:pad - l + W])
        diff = cv2.absdiff(left, shifted)
        integ = cv2.integral(diff).astype(np.int64)  # (H+1, W+1)
        win = integ[n:, n:] - integ[:-n, n:] - integ[n:, :-n] + integ[:-n, :-n]
        D[border:H - border, border:W - border, l] = win[ys, xs] // (n * n)
    return D
