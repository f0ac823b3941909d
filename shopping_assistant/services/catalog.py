"""Static product catalog used to answer search commands."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CatalogEntry:
    """A purchasable product."""

    name: str
    brand: str
    price: Decimal


CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry("organic apples", "Fresh Farms", Decimal("3.99")),
    CatalogEntry("apples", "Local Orchard", Decimal("2.49")),
    CatalogEntry("almond milk", "NutriGood", Decimal("4.50")),
    CatalogEntry("regular milk", "DairyPure", Decimal("2.99")),
    CatalogEntry("toothpaste", "SmileBright", Decimal("4.99")),
    CatalogEntry("toothpaste", "BudgetClean", Decimal("2.49")),
)


def search_catalog(
    query: str,
    price_max: Decimal | None = None,
    catalog: tuple[CatalogEntry, ...] = CATALOG,
) -> list[CatalogEntry]:
    """Return entries whose name contains the query and whose price fits under price_max."""
    query_lower = query.lower()
    return [
        entry
        for entry in catalog
        if query_lower in entry.name.lower() and (price_max is None or entry.price <= price_max)
    ]
