# vision.py
import logging

import cv2
import numpy as np

from cube import Color

logger = logging.getLogger(__name__)

# Reference BGR colors (typical sticker colors). We'll convert to LAB for perceptual comparison.
REF_BGR = {
    Color.WHITE: np.array([255, 255, 255], dtype=np.uint8),
    Color.YELLOW: np.array([0, 255, 255], dtype=np.uint8),
    Color.RED: np.array([0, 0, 255], dtype=np.uint8),
    Color.ORANGE: np.array([0, 165, 255], dtype=np.uint8),
    Color.BLUE: np.array([255, 0, 0], dtype=np.uint8),
    Color.GREEN: np.array([0, 255, 0], dtype=np.uint8),
}

# Precompute LAB references
REF_LAB = {
    color: cv2.cvtColor(np.uint8([[bgr]]), cv2.COLOR_BGR2LAB)[0][0].astype(float)
    for color, bgr in REF_BGR.items()
}


def bgr_to_lab(bgr):
    """Convert a 3-element BGR array (uint8) to LAB (float)."""
    pixel = np.uint8([[[int(bgr[0]), int(bgr[1]), int(bgr[2])]]])
    return cv2.cvtColor(pixel, cv2.COLOR_BGR2LAB)[0][0].astype(float)


def closest_color(bgr):
    """Return the Color closest to the provided BGR color."""
    lab = bgr_to_lab(bgr)
    return min(REF_LAB, key=lambda color: np.linalg.norm(lab - REF_LAB[color]))


def decode_image(raw):
    """Decode uploaded bytes into an OpenCV BGR array."""
    arr = np.frombuffer(raw, np.uint8)
    img_bgr = cv2.imdecode(arr, cv2.IMREAD_COLOR)
    if img_bgr is None:
        raise ValueError("Could not decode image.")
    return img_bgr


def detect_face_colors_from_image(img_bgr):
    """
    Input:
      img_bgr : OpenCV BGR numpy array representing one face photo
    Returns:
      list of 9 Colors (row-major order), ready to paint onto one face
    Notes:
      - The photo should show a single face reasonably centered.
      - It is cropped to a centered square, resized and divided into a 3x3 grid.
        Each cell is sampled in its central patch (to avoid borders) and mapped
        to the nearest reference color.
    """
    h, w = img_bgr.shape[:2]
    side = min(h, w)
    cx, cy = w // 2, h // 2
    half = side // 2
    crop = img_bgr[cy - half:cy + half, cx - half:cx + half].copy()
    size = 300
    face = cv2.resize(crop, (size, size), interpolation=cv2.INTER_AREA)

    stickers = []
    cell = size // 3
    margin = int(cell * 0.22)  # sample center ~56% area
    for r in range(3):
        for c in range(3):
            y1 = r * cell + margin
            y2 = (r + 1) * cell - margin
            x1 = c * cell + margin
            x2 = (c + 1) * cell - margin
            patch = face[y1:y2, x1:x2]
            avg_bgr = np.mean(patch.reshape(-1, 3), axis=0)
            color = closest_color(avg_bgr)
            stickers.append(color)
            logger.debug("cell %d,%d avg %s -> %s", r, c, avg_bgr, color.value)

    return stickers
