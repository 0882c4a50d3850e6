import numpy as np


def block_mean(block: np.ndarray) -> np.ndarray:
    """Per-channel mean of a (h, w) or (h, w, C) block. Returns shape (C,)."""
    channels = 1 if block.ndim == 2 else block.shape[2]
    if block.size == 0:
        return np.zeros(channels)
    return block.reshape(-1, channels).mean(axis=0, dtype=np.float64)


def block_brightness(block: np.ndarray) -> int:
    """Average luma of a single-channel block, truncated to 0-255."""
    return int(np.clip(block_mean(block)[0], 0, 255))


def block_colour(block: np.ndarray) -> tuple[int, int, int]:
    """Average RGB of a three-channel block, each channel rounded to 0-255."""
    mean = np.clip(np.floor(block_mean(block) + 0.5), 0, 255)
    r, g, b = (int(v) for v in mean)
    return r, g, b


def invert(samples: np.ndarray) -> np.ndarray:
    """Flip intensities so that 0 becomes 255 and vice versa."""
    return 255 - samples


def stretch_contrast(samples: np.ndarray) -> np.ndarray:
    """Linearly rescale intensities so the darkest sample is 0 and the brightest 255.

    A uniform image has no range to stretch and is returned as a float copy.
    """
    arr = np.asarray(samples, dtype=np.float64)
    lo = arr.min()
    hi = arr.max()
    if hi == lo:
        return arr.copy()
    return (arr - lo) * 255.0 / (hi - lo)
