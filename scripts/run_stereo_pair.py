import argparse
import logging
import sys
from pathlib import Path

from stereo_bp.config import BPConfig
from stereo_bp.decode import disparity_map, render_disparity
from stereo_bp.driver import compute_disparity
from stereo_bp.errors import InvalidInput, StereoBPError
from stereo_bp.io_utils import imread_gray_uint8, load_stereo_pair, save_u8_png, show_u8
from stereo_bp.metrics import bad_pixel_rate, disparity_rmse, interior_mask, psnr_u8


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Stereo disparity by loopy belief propagation")
    ap.add_argument("left", help="Path to left rectified image")
    ap.add_argument("right", help="Path to right rectified image")
    ap.add_argument("--labels", type=int, default=16, help="#disparity labels")
    ap.add_argument("--iters", type=int, default=40, help="BP iterations")
    ap.add_argument("--lam", type=int, default=20, help="smoothness weight")
    ap.add_argument("--trunc", type=int, default=2, help="smoothness truncation")
    ap.add_argument("--radius", type=int, default=2, help="block-match window radius")
    ap.add_argument("--border", type=int, default=None, help="inactive border (default max(labels, radius))")
    ap.add_argument("--out", default="output.png")
    ap.add_argument("--gt", default=None, help="Ground-truth disparity image")
    ap.add_argument("--gt_scale", type=int, default=16, help="gt pixel value = disparity * gt_scale")
    ap.add_argument("--show", action="store_true")
    ap.add_argument("--progress", action="store_true")
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    config = BPConfig(labels=args.labels, iterations=args.iters, lam=args.lam,
                      trunc=args.trunc, radius=args.radius, border=args.border)
    try:
        left, right = load_stereo_pair(args.left, args.right)
        gt = None
        if args.gt:
            gt = imread_gray_uint8(args.gt)
            if gt.shape != left.shape:
                raise InvalidInput(f"ground truth size {gt.shape} differs from image size {left.shape}")
        grid, energies = compute_disparity(left, right, config, progress=args.progress)
    except StereoBPError as e:
        logging.error("%s", e)
        return 1

    B = config.active_border
    labels = disparity_map(grid, B)
    vis = render_disparity(labels, config.labels)

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    logging.info("Saving results to %s", out)
    save_u8_png(out, vis)

    if energies:
        print(f"final energy: {energies[-1]}")
    if gt is not None:
        mask = interior_mask(labels.shape, B)
        gt_labels = gt // args.gt_scale
        print(f"bad pixels (>1): {100 * bad_pixel_rate(labels, gt_labels, 1, mask):.2f}%")
        print(f"disparity RMSE: {disparity_rmse(labels, gt_labels, mask):.3f}")
        print(f"PSNR vs gt: {psnr_u8(vis, render_disparity(gt_labels, config.labels)):.2f} dB")
    if args.show:
        show_u8(vis)
    return 0


if __name__ == "__main__":
    sys.exit(main())
