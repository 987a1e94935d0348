from pathlib import Path

import cv2
import numpy as np


def load_bitmap(path: str | Path) -> np.ndarray | None:
    # np.fromfile + imdecode also copes with non-ASCII paths on Windows
    data = np.fromfile(str(path), dtype=np.uint8)
    if data.size == 0:
        return None
    return cv2.imdecode(data, cv2.IMREAD_COLOR)


def verify_inversion(source_path: str | Path, output_path: str | Path) -> bool:
    """Checks that the output decodes to the color negative of the source."""
    source = load_bitmap(source_path)
    output = load_bitmap(output_path)
    if source is None or output is None:
        return False
    if source.shape != output.shape:
        return False
    return bool(np.array_equal(cv2.bitwise_not(source), output))
