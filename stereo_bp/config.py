from dataclasses import dataclass
from typing import Optional

from .errors import InvalidInput

# labels are reported as 8-bit disparities
MAX_LABELS = 256


@dataclass(frozen=True)
class BPConfig:
    """
    Parameters of the stereo MRF.
    labels:     number of disparity labels L
    iterations: outer BP iterations (each = R, L, U, D sweeps + decode)
    lam, trunc: truncated-linear smoothness lam * min(|i-j|, trunc)
    radius:     block-match window radius r, window is (2r+1)^2
    border:     inactive margin B, defaults to max(labels, radius)
    """
    labels: int = 16
    iterations: int = 40
    lam: int = 20
    trunc: int = 2
    radius: int = 2
    border: Optional[int] = None

    @property
    def active_border(self):
        if self.border is None:
            return max(self.labels, self.radius)
        return self.border

    @property
    def window_area(self):
        return (2 * self.radius + 1) ** 2

    def validate(self):
        if not 1 <= self.labels <= MAX_LABELS:
            raise InvalidInput(f"labels must be in [1, {MAX_LABELS}], got {self.labels}")
        for name in ("iterations", "lam", "trunc", "radius"):
            if getattr(self, name) < 0:
                raise InvalidInput(f"{name} must be non-negative, got {getattr(self, name)}")
        need = max(self.labels, self.radius)
        if self.active_border < need:
            raise InvalidInput(f"border {self.active_border} < max(labels, radius) = {need}")
        return self
