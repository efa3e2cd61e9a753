from __future__ import annotations

import numpy as np

DEFAULT_QUALITY = 10
MIN_ALPHA = 125
WHITE_THRESHOLD = 250


def sample_pixels(
    image: np.ndarray,
    quality: int = DEFAULT_QUALITY,
    ignore_white: bool = True,
) -> np.ndarray:
    """Pick every ``quality``-th pixel that is mostly opaque and, optionally, not white.

    ``image`` is an (H, W, 3) or (H, W, 4) uint8 array. Returns an (N, 3)
    uint8 array of RGB samples, which may be empty.
    """
    if quality < 1:
        raise ValueError("quality must be greater than 0")
    if image.ndim != 3 or image.shape[2] not in (3, 4):
        raise ValueError("image must have shape (H, W, 3) or (H, W, 4)")
    if not np.issubdtype(image.dtype, np.integer):
        raise ValueError("image must hold integer channel values")
    if image.size and (int(image.min()) < 0 or int(image.max()) > 255):
        raise ValueError("channel values must lie in [0, 255]")

    flat = image.reshape(-1, image.shape[2])[::quality]
    keep = np.ones(flat.shape[0], dtype=bool)
    if flat.shape[1] == 4:
        keep &= flat[:, 3] >= MIN_ALPHA

    rgb = flat[:, :3]
    if ignore_white:
        keep &= ~np.all(rgb > WHITE_THRESHOLD, axis=1)
    return rgb[keep].astype(np.uint8)
