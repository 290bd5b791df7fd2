"""Display order for product photos.

Photo filenames carry their intended position as a numeric prefix, e.g.
``kugeln/100__PXL_120232.jpg``. Files without a usable prefix are shown last
instead of failing the build.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, Optional, Tuple

from .models import ProductImage

LOGGER = logging.getLogger(__name__)

UNSORTED_PRIORITY = 10000
PRIORITY_DELIMITER = "__"

_DIGITS = re.compile(r"[0-9]+")


def parse_image_priority(path: str) -> Optional[int]:
    """Return the numeric prefix of the filename segment, or ``None``."""

    _, separator, remainder = path.partition("/")
    if not separator:
        return None
    segment = remainder.split("/", 1)[0]
    prefix, delimiter, _ = segment.partition(PRIORITY_DELIMITER)
    if not delimiter or not _DIGITS.fullmatch(prefix):
        return None
    return int(prefix)


def image_priority(image: ProductImage) -> int:
    priority = parse_image_priority(image.small)
    if priority is None:
        LOGGER.debug("No display priority in %s; sorting it last", image.small)
        return UNSORTED_PRIORITY
    return priority


def order_images(images: Iterable[ProductImage]) -> Tuple[ProductImage, ...]:
    """Sort images by display priority, keeping input order among equal keys."""

    return tuple(sorted(images, key=image_priority))
