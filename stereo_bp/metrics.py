import numpy as np
from skimage.metrics import mean_squared_error, peak_signal_noise_ratio


def interior_mask(shape, border):
    H, W = shape
    mask = np.zeros((H, W), dtype=bool)
    mask[border:H - border, border:W - border] = True
    return mask


def _masked(pred, gt, mask):
    pred = np.asarray(pred, dtype=np.float64)
    gt = np.asarray(gt, dtype=np.float64)
    if mask is None:
        return pred.ravel(), gt.ravel()
    return pred[mask], gt[mask]


def bad_pixel_rate(pred, gt, threshold=1, mask=None):
    """Fraction of pixels whose disparity error exceeds `threshold`."""
    p, g = _masked(pred, gt, mask)
    if p.size == 0:
        return 0.0
    return float(np.mean(np.abs(p - g) > threshold))


def disparity_rmse(pred, gt, mask=None):
    p, g = _masked(pred, gt, mask)
    if p.size == 0:
        return 0.0
    return float(np.sqrt(mean_squared_error(g, p)))


def psnr_u8(pred_u8, gt_u8):
    return float(peak_signal_noise_ratio(gt_u8, pred_u8, data_range=255))
