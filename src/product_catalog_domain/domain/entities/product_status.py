"""Product status value object."""

from enum import Enum


class ProductStatus(str, Enum):
    """Publication status of a product; the value is what goes on the wire and into storage."""

    ENABLED = "enabled"
    DISABLED = "disabled"
