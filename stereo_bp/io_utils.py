import numpy as np
import cv2

from .errors import InvalidInput


def imread_gray_uint8(path):
    try:
        buf = np.fromfile(str(path), dtype=np.uint8)
    except OSError as e:
        raise InvalidInput(f"cannot read image {path}") from e
    img = cv2.imdecode(buf, cv2.IMREAD_GRAYSCALE) if buf.size else None
    if img is None:
        raise InvalidInput(f"cannot decode image {path}")
    return img.astype(np.uint8)


def load_stereo_pair(left_path, right_path):
    left = imread_gray_uint8(left_path)
    right = imread_gray_uint8(right_path)
    return left, right


def save_u8_png(path, u8):
    cv2.imencode(".png", u8)[1].tofile(str(path))


def show_u8(u8, title="disparity"):
    cv2.namedWindow(title, cv2.WINDOW_AUTOSIZE)
    cv2.imshow(title, u8)
    cv2.waitKey(0)
    cv2.destroyWindow(title)
