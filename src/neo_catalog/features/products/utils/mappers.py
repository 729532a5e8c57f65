"""Entity to response model mapping."""

from ..entities.product import Product
from ..models.responses import ColorResponse, ProductResponse, ProductSummary, SizeResponse


def to_product_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        description=product.description,
        model=product.model,
        brand=product.brand,
        sku=product.sku,
        price=product.price,
        category=product.category,
        colors=[ColorResponse(id=c.id, name=c.name, hex_code=c.hex_code) for c in product.colors],
        sizes=[
            SizeResponse(id=s.id, name=s.name, code=s.code, sort_order=s.sort_order)
            for s in sorted(product.sizes, key=lambda s: (s.sort_order, s.id))
        ],
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def to_product_summary(product: Product) -> ProductSummary:
    return ProductSummary(
        id=product.id,
        name=product.name,
        brand=product.brand,
        model=product.model,
        sku=product.sku,
        price=product.price,
        category=product.category,
        created_at=product.created_at,
    )
