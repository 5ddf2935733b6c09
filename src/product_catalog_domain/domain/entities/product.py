"""Product entity."""

import math
import uuid
from dataclasses import dataclass, field

from src.common.exceptions.custom_exceptions import ValidationError

from .product_status import ProductStatus

MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500


def _new_product_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Product:
    """A catalog product.

    Every construction and every mutator runs the full validation pass. A mutator
    whose result fails validation restores the previous field values before the
    ValidationError propagates, so a rejected change never leaves the entity half-applied.
    """

    name: str
    description: str
    price: float
    status: ProductStatus | str = field(init=False)
    id: str = field(init=False)

    def __post_init__(self) -> None:
        """Assigns a fresh id and the disabled status, then validates."""
        self.id = _new_product_id()
        self.status = ProductStatus.DISABLED
        self.is_valid()

    @classmethod
    def from_storage(
        cls, product_id: str, name: str, description: str | None, price: float, status: str | None
    ) -> "Product":
        """Rebuilds a product read back from storage, keeping its persisted id and status."""
        product = cls.__new__(cls)
        product.name = name
        product.description = description or ""
        product.price = float(price)
        product.status = status
        product.set_id(product_id)
        product.is_valid()
        return product

    def set_id(self, product_id: str) -> None:
        """Assigns the persisted id. Only the persistence layer calls this."""
        self.id = product_id

    def is_valid(self) -> None:
        """Raises the first failing invariant as a ValidationError."""
        if not self.id:
            raise ValidationError("invalid id", code="id_empty")
        if not self.name:
            raise ValidationError("name cannot be empty", code="name_empty")
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"name cannot be longer than {MAX_NAME_LENGTH} characters", code="name_too_long"
            )
        if len(self.description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"description cannot be longer than {MAX_DESCRIPTION_LENGTH} characters",
                code="description_too_long",
            )
        if not self.status:
            self.status = ProductStatus.DISABLED
        try:
            self.status = ProductStatus(self.status)
        except ValueError:
            raise ValidationError("status must be enabled or disabled", code="status_invalid")
        # NaN and infinities fail here as well
        if not math.isfinite(self.price) or self.price < 0:
            raise ValidationError("price must be greater or equal zero", code="price_negative")

    def update(self, name: str, description: str) -> None:
        self._apply(name=name, description=description)

    def change_price(self, price: float) -> None:
        self._apply(price=price)

    def enable(self) -> None:
        """Enables the product when it has a positive price.

        A zero-price product keeps its current status; only the validation pass runs.
        """
        if self.price > 0:
            self.status = ProductStatus.ENABLED
            return
        self.is_valid()

    def disable(self) -> None:
        self._apply(status=ProductStatus.DISABLED)

    def _apply(self, **changes) -> None:
        previous = {attr: getattr(self, attr) for attr in changes}
        for attr, value in changes.items():
            setattr(self, attr, value)
        try:
            self.is_valid()
        except ValidationError:
            for attr, value in previous.items():
                setattr(self, attr, value)
            raise
