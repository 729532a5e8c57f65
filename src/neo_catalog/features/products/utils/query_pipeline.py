"""Composable filter, sort and pagination pipeline for product listings.

A pipeline is built once from a validated ``ProductFilter`` and can be run
against an in-memory sequence (``apply``) or rendered to parameterized
PostgreSQL (``to_sql``/``count_sql``). Both renderings share the same
semantics:

- filters are conjunctive; the search term is OR'd across text fields;
- sorting uses a whitelisted field with id ascending as a stable tie-break,
  text compared case-insensitively and nulls ordered last;
- the total is counted on the filtered set before the page window applies.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from ..entities.product import Product
from ..models.requests import ProductFilter
from ...pagination.entities import PageRequest, PagedResult, SortOrder

PRODUCT_COLUMNS = (
    "id", "name", "description", "model", "brand", "sku",
    "price", "category", "created_at", "updated_at",
)


class SortField(str, Enum):
    """Whitelisted sort fields."""
    NAME = "name"
    PRICE = "price"
    BRAND = "brand"
    MODEL = "model"
    CATEGORY = "category"
    CREATED_AT = "created_at"

    @property
    def is_text(self) -> bool:
        return self in TEXT_SORT_FIELDS


TEXT_SORT_FIELDS = frozenset({SortField.NAME, SortField.BRAND, SortField.MODEL, SortField.CATEGORY})

SORT_ALIASES = {
    "createdat": SortField.CREATED_AT,
    "created": SortField.CREATED_AT,
    "date": SortField.CREATED_AT,
}

# Fields that sort newest/highest first when no direction is given
DEFAULT_DESCENDING = frozenset({SortField.CREATED_AT})


def normalize_text(value: Optional[str]) -> Optional[str]:
    """Trim and lower-case; blank becomes None."""
    if value is None:
        return None
    value = value.strip().lower()
    return value or None


def normalize_decimal(value: Optional[Decimal]) -> Optional[str]:
    """Render a price so equal amounts always produce the same text."""
    if value is None:
        return None
    normalized = Decimal(value).normalize()
    return format(normalized, "f")


@dataclass(frozen=True)
class SortSpec:
    """Resolved sort field and direction."""

    field: SortField = SortField.CREATED_AT
    descending: bool = True

    @classmethod
    def resolve(cls, sort_by: Optional[str], descending: Optional[bool]) -> "SortSpec":
        """Map a requested field onto the whitelist.

        Unknown or missing fields fall back to creation time. An explicit
        direction always wins; otherwise the field's default direction is used.
        """
        key = (sort_by or "").strip().lower().replace("-", "_")
        try:
            sort_field = SortField(key)
        except ValueError:
            sort_field = SORT_ALIASES.get(key.replace("_", ""), SortField.CREATED_AT)

        if descending is None:
            descending = sort_field in DEFAULT_DESCENDING
        return cls(field=sort_field, descending=bool(descending))

    @property
    def order(self) -> SortOrder:
        return SortOrder.from_descending(self.descending)

    def to_sql(self) -> str:
        column = f"LOWER({self.field.value})" if self.field.is_text else self.field.value
        return f"{column} {self.order.value} NULLS LAST, id ASC"


class ProductPredicate(Protocol):
    """A single filter criterion."""

    def matches(self, product: Product) -> bool:
        ...

    def to_sql(self, params: List[Any]) -> str:
        """Render a WHERE fragment, appending bound values to ``params``."""
        ...


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass(frozen=True)
class SearchPredicate:
    """Case-insensitive substring match across the product's text fields."""

    term: str
    fields: Tuple[str, ...] = ("name", "description", "brand", "model", "sku")

    def matches(self, product: Product) -> bool:
        return any(self.term in (getattr(product, name) or "").lower() for name in self.fields)

    def to_sql(self, params: List[Any]) -> str:
        params.append(f"%{_escape_like(self.term)}%")
        placeholder = f"${len(params)}"
        return "(" + " OR ".join(f"{name} ILIKE {placeholder}" for name in self.fields) + ")"


@dataclass(frozen=True)
class EqualsIgnoreCasePredicate:
    """Case-insensitive equality on one text field."""

    field: str
    value: str

    def matches(self, product: Product) -> bool:
        current = getattr(product, self.field)
        return current is not None and current.lower() == self.value

    def to_sql(self, params: List[Any]) -> str:
        params.append(self.value)
        return f"LOWER({self.field}) = ${len(params)}"


@dataclass(frozen=True)
class PriceRangePredicate:
    """Inclusive price bounds; either side may be open."""

    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None

    def matches(self, product: Product) -> bool:
        if self.min_price is not None and product.price < self.min_price:
            return False
        if self.max_price is not None and product.price > self.max_price:
            return False
        return True

    def to_sql(self, params: List[Any]) -> str:
        clauses = []
        if self.min_price is not None:
            params.append(self.min_price)
            clauses.append(f"price >= ${len(params)}")
        if self.max_price is not None:
            params.append(self.max_price)
            clauses.append(f"price <= ${len(params)}")
        return " AND ".join(clauses)


def normalize_filter(product_filter: ProductFilter, max_page_size: int) -> Dict[str, Any]:
    """Canonical form of a filter: every field present, values normalized.

    Two filters that select the same page map to equal dictionaries.
    """
    sort = SortSpec.resolve(product_filter.sort_by, product_filter.descending)
    return {
        "search": normalize_text(product_filter.search_term),
        "category": normalize_text(product_filter.category),
        "brand": normalize_text(product_filter.brand),
        "min_price": normalize_decimal(product_filter.min_price),
        "max_price": normalize_decimal(product_filter.max_price),
        "sort": sort.field.value,
        "descending": sort.descending,
        "page": product_filter.page,
        "page_size": max(1, min(product_filter.page_size, max_page_size)),
    }


class ProductQueryPipeline:
    """Filter, sort and page window for one product listing request."""

    def __init__(
        self,
        predicates: Sequence[ProductPredicate],
        sort: SortSpec,
        window: PageRequest,
    ):
        self.predicates = list(predicates)
        self.sort = sort
        self.window = window

    @classmethod
    def from_filter(cls, product_filter: ProductFilter, max_page_size: int = 100) -> "ProductQueryPipeline":
        """Build a pipeline from a filter that already passed validation."""
        predicates: List[ProductPredicate] = []

        search = normalize_text(product_filter.search_term)
        if search:
            predicates.append(SearchPredicate(search))

        category = normalize_text(product_filter.category)
        if category:
            predicates.append(EqualsIgnoreCasePredicate("category", category))

        brand = normalize_text(product_filter.brand)
        if brand:
            predicates.append(EqualsIgnoreCasePredicate("brand", brand))

        if product_filter.min_price is not None or product_filter.max_price is not None:
            predicates.append(PriceRangePredicate(product_filter.min_price, product_filter.max_price))

        return cls(
            predicates=predicates,
            sort=SortSpec.resolve(product_filter.sort_by, product_filter.descending),
            window=PageRequest.clamped(product_filter.page, product_filter.page_size, max_page_size),
        )

    # In-memory rendering

    def matches(self, product: Product) -> bool:
        return all(predicate.matches(product) for predicate in self.predicates)

    def filter(self, products: Sequence[Product]) -> List[Product]:
        return [product for product in products if self.matches(product)]

    def order(self, products: Sequence[Product]) -> List[Product]:
        """Sort by the resolved field, id ascending among equals, nulls last."""
        by_id = sorted(products, key=lambda p: p.id or 0)
        attribute = self.sort.field.value

        def sort_value(product: Product):
            value = getattr(product, attribute)
            if value is not None and self.sort.field.is_text:
                return value.lower()
            return value

        present = [p for p in by_id if sort_value(p) is not None]
        missing = [p for p in by_id if sort_value(p) is None]
        # list.sort is stable under reverse=True, so id order survives for ties
        present.sort(key=sort_value, reverse=self.sort.descending)
        return present + missing

    def apply(self, products: Sequence[Product]) -> PagedResult[Product]:
        matched = self.filter(products)
        ordered = self.order(matched)
        start = self.window.offset
        return PagedResult(
            items=ordered[start:start + self.window.limit],
            total_count=len(matched),
            page=self.window.page,
            page_size=self.window.page_size,
        )

    # SQL rendering

    def where_sql(self, params: List[Any]) -> str:
        clauses = [predicate.to_sql(params) for predicate in self.predicates]
        clauses = [clause for clause in clauses if clause]
        return f"WHERE {' AND '.join(clauses)}" if clauses else ""

    def to_sql(self, table: str) -> Tuple[str, List[Any]]:
        """Render the page query for ``table``.

        Returns:
            Tuple of SQL text with ``$n`` placeholders and the bound values
        """
        params: List[Any] = []
        where = self.where_sql(params)
        params.append(self.window.limit)
        limit_placeholder = f"${len(params)}"
        params.append(self.window.offset)
        offset_placeholder = f"${len(params)}"
        query = (
            f"SELECT {', '.join(PRODUCT_COLUMNS)} FROM {table} "
            f"{where} ORDER BY {self.sort.to_sql()} "
            f"LIMIT {limit_placeholder} OFFSET {offset_placeholder}"
        )
        return " ".join(query.split()), params

    def count_sql(self, table: str) -> Tuple[str, List[Any]]:
        params: List[Any] = []
        where = self.where_sql(params)
        query = f"SELECT COUNT(*) FROM {table} {where}"
        return query.strip(), params
