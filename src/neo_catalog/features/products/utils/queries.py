"""SQL statements for the product tables.

``{schema}`` is substituted with the configured schema name before use.
"""

PRODUCT_TABLE = "{schema}.products"

PRODUCT_GET_BY_ID = """
    SELECT id, name, description, model, brand, sku, price, category, created_at, updated_at
    FROM {schema}.products
    WHERE id = $1
"""

PRODUCT_COLORS_BY_PRODUCT = """
    SELECT c.id, c.name, c.hex_code
    FROM {schema}.product_colors pc
    JOIN {schema}.colors c ON c.id = pc.color_id
    WHERE pc.product_id = $1
    ORDER BY c.id
"""

PRODUCT_SIZES_BY_PRODUCT = """
    SELECT s.id, s.name, s.code, s.sort_order
    FROM {schema}.product_sizes ps
    JOIN {schema}.sizes s ON s.id = ps.size_id
    WHERE ps.product_id = $1
    ORDER BY s.sort_order, s.id
"""

PRODUCT_EXISTS_BY_SKU = """
    SELECT EXISTS(
        SELECT 1 FROM {schema}.products
        WHERE sku = $1 AND ($2::int IS NULL OR id <> $2)
    )
"""

PRODUCT_INSERT = """
    INSERT INTO {schema}.products (
        name, description, model, brand, sku, price, category, created_at, updated_at
    ) VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
    RETURNING id
"""

PRODUCT_UPDATE = """
    UPDATE {schema}.products
    SET name = $2, description = $3, model = $4, brand = $5, sku = $6,
        price = $7, category = $8, updated_at = $9
    WHERE id = $1
"""

PRODUCT_DELETE = """
    DELETE FROM {schema}.products WHERE id = $1
"""

PRODUCT_COLORS_DELETE = """
    DELETE FROM {schema}.product_colors WHERE product_id = $1
"""

PRODUCT_SIZES_DELETE = """
    DELETE FROM {schema}.product_sizes WHERE product_id = $1
"""

PRODUCT_COLORS_INSERT = """
    INSERT INTO {schema}.product_colors (product_id, color_id) VALUES ($1, $2)
"""

PRODUCT_SIZES_INSERT = """
    INSERT INTO {schema}.product_sizes (product_id, size_id) VALUES ($1, $2)
"""

COLORS_BY_IDS = """
    SELECT id, name, hex_code FROM {schema}.colors WHERE id = ANY($1::int[]) ORDER BY id
"""

SIZES_BY_IDS = """
    SELECT id, name, code, sort_order FROM {schema}.sizes WHERE id = ANY($1::int[]) ORDER BY sort_order, id
"""
