"""In-memory invoice ledger for a single POS session.

The ledger owns the rows of one invoice and every figure derived from them.
After each public operation returns, the following hold:

* every line's ``line_total`` equals ``quantity * unit_price``;
* ``grand_total`` is the sum of the line totals in display order;
* ``discount_amount`` is ``grand_total * discount_percent / 100`` rounded
  half-up to the minor currency unit;
* ``net_payable`` is ``grand_total - discount_amount``.

A rejected operation raises ``InvalidArgument`` or ``NotFound`` and leaves the
ledger exactly as it was.
"""

import logging
import threading
from dataclasses import dataclass, field, replace
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import List, Tuple

from pos_backend.app.core.errors import InvalidArgument, NotFound

logger = logging.getLogger(__name__)

MINOR_UNIT = Decimal("0.01")
ZERO = Decimal("0.00")
HUNDRED = Decimal("100")
# Largest value the catalog price column can hold.
MAX_UNIT_PRICE = Decimal("99999999.99")
MAX_QUANTITY = 1_000_000


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(MINOR_UNIT, rounding=ROUND_HALF_UP)


def _to_decimal(value, label: str) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise InvalidArgument(f"{label} must be a number")
    try:
        # floats go through str so 0.1 stays 0.1 and not its binary expansion
        number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidArgument(f"{label} must be a number") from None
    if not number.is_finite():
        raise InvalidArgument(f"{label} must be a finite number")
    if number.is_zero():
        number = abs(number)
    return number


def validate_unit_price(value) -> Decimal:
    price = _to_decimal(value, "Unit price")
    if price < 0:
        raise InvalidArgument("Unit price cannot be negative")
    if price > MAX_UNIT_PRICE:
        raise InvalidArgument(f"Unit price cannot exceed {MAX_UNIT_PRICE}")
    if price != price.quantize(MINOR_UNIT):
        raise InvalidArgument("Unit price cannot have more than two decimal places")
    return price.quantize(MINOR_UNIT)


def validate_quantity(value) -> int:
    number = _to_decimal(value, "Quantity")
    if number != number.to_integral_value():
        raise InvalidArgument("Quantity must be a whole number")
    if number <= 0:
        raise InvalidArgument("Quantity must be greater than zero")
    if number > MAX_QUANTITY:
        raise InvalidArgument(f"Quantity cannot exceed {MAX_QUANTITY}")
    return int(number)


def validate_discount_percent(value) -> Decimal:
    percent = _to_decimal(value, "Discount percent")
    if percent < 0 or percent > HUNDRED:
        raise InvalidArgument("Discount percent must be between 0 and 100")
    if percent != percent.quantize(MINOR_UNIT):
        raise InvalidArgument("Discount percent cannot have more than two decimal places")
    return percent.quantize(MINOR_UNIT)


@dataclass
class LineItem:
    id: int
    name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal = ZERO

    def recompute(self) -> None:
        self.line_total = quantize_money(self.unit_price * self.quantity)


@dataclass(frozen=True)
class InvoiceSnapshot:
    """Read-only view of an invoice, sufficient to redraw the table and footer."""

    lines: Tuple[LineItem, ...] = ()
    discount_percent: Decimal = ZERO
    grand_total: Decimal = ZERO
    discount_amount: Decimal = ZERO
    net_payable: Decimal = ZERO

    @property
    def line_count(self) -> int:
        return len(self.lines)


@dataclass
class InvoiceLedger:
    lines: List[LineItem] = field(default_factory=list)
    discount_percent: Decimal = ZERO
    grand_total: Decimal = ZERO
    discount_amount: Decimal = ZERO
    net_payable: Decimal = ZERO
    _last_line_id: int = field(default=0, init=False, repr=False)
    # Re-entrant so callers can hold it around a mutation plus the snapshot they return.
    lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False, compare=False)

    def add_line(self, name: str, unit_price) -> LineItem:
        """Append a row with quantity 1 at ``unit_price`` and return a copy of it."""
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgument("Line name cannot be empty")
        price = validate_unit_price(unit_price)

        with self.lock:
            self._last_line_id += 1
            line = LineItem(id=self._last_line_id, name=name.strip(), quantity=1, unit_price=price)
            self.lines.append(line)
            self._recompute(line)
            logger.debug("Added line %s (%s @ %s)", line.id, line.name, line.unit_price)
            return replace(line)

    def get_line(self, line_id: int) -> LineItem:
        with self.lock:
            return replace(self._find(line_id))

    def update_line_quantity(self, line_id: int, quantity) -> LineItem:
        new_quantity = validate_quantity(quantity)
        with self.lock:
            line = self._find(line_id)
            line.quantity = new_quantity
            self._recompute(line)
            logger.debug("Line %s quantity set to %s", line.id, line.quantity)
            return replace(line)

    def update_line_unit_price(self, line_id: int, unit_price) -> LineItem:
        new_price = validate_unit_price(unit_price)
        with self.lock:
            line = self._find(line_id)
            line.unit_price = new_price
            self._recompute(line)
            logger.debug("Line %s unit price set to %s", line.id, line.unit_price)
            return replace(line)

    def update_line(self, line_id: int, quantity=None, unit_price=None) -> LineItem:
        """Apply a quantity and/or price edit, validating both before changing either."""
        new_quantity = None if quantity is None else validate_quantity(quantity)
        new_price = None if unit_price is None else validate_unit_price(unit_price)
        with self.lock:
            line = self._find(line_id)
            if new_quantity is not None:
                line.quantity = new_quantity
            if new_price is not None:
                line.unit_price = new_price
            self._recompute(line)
            logger.debug("Line %s updated to %s @ %s", line.id, line.quantity, line.unit_price)
            return replace(line)

    def remove_line(self, line_id: int) -> LineItem:
        with self.lock:
            line = self._find(line_id)
            self.lines.remove(line)
            self._recompute()
            logger.debug("Removed line %s", line.id)
            return replace(line)

    def set_discount_percent(self, percent) -> InvoiceSnapshot:
        new_percent = validate_discount_percent(percent)
        with self.lock:
            self.discount_percent = new_percent
            self._apply_discount()
            logger.debug("Discount set to %s%%", self.discount_percent)
            return self.snapshot()

    def snapshot(self) -> InvoiceSnapshot:
        with self.lock:
            return InvoiceSnapshot(
                lines=tuple(replace(line) for line in self.lines),
                discount_percent=self.discount_percent,
                grand_total=self.grand_total,
                discount_amount=self.discount_amount,
                net_payable=self.net_payable,
            )

    def _find(self, line_id: int) -> LineItem:
        for line in self.lines:
            if line.id == line_id:
                return line
        raise NotFound(f"Line {line_id} not found")

    def _recompute(self, changed: LineItem | None = None) -> None:
        if changed is not None:
            changed.recompute()
        self.grand_total = sum((line.line_total for line in self.lines), ZERO)
        self._apply_discount()

    def _apply_discount(self) -> None:
        self.discount_amount = quantize_money(self.grand_total * self.discount_percent / HUNDRED)
        self.net_payable = self.grand_total - self.discount_amount
