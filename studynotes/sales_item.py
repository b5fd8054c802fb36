"""A book sale record: ISBN, copies sold and revenue."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SalesItem:
    """Sales of one book."""

    isbn: str = ""
    units_sold: int = 0
    revenue: float = 0.0

    @classmethod
    def parse(cls, text: str) -> SalesItem:
        """Read ``isbn units price`` and record ``units * price`` as revenue."""
        tokens = text.split()
        if len(tokens) < 3:
            raise ValueError(f"expected isbn, units and price: {text!r}")
        units = int(tokens[1])
        if units < 0:
            raise ValueError(f"units sold cannot be negative: {units}")
        price = float(tokens[2])
        return cls(tokens[0], units, units * price)

    def __iadd__(self, other: SalesItem) -> SalesItem:
        """Add another record's sales; both are assumed to share an ISBN."""
        self.units_sold += other.units_sold
        self.revenue += other.revenue
        return self

    def __add__(self, other: SalesItem) -> SalesItem:
        result = SalesItem(self.isbn, self.units_sold, self.revenue)
        result += other
        return result

    def avg_price(self) -> float:
        return self.revenue / self.units_sold if self.units_sold else 0.0

    def __str__(self) -> str:
        return f"{self.isbn} {self.units_sold} {self.revenue:g} {self.avg_price():g}"


def compare_isbn(lhs: SalesItem, rhs: SalesItem) -> bool:
    return lhs.isbn == rhs.isbn