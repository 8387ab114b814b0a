"""
Product Services

Parameter parsing and the single store operation behind each product
route. Every function taking a `session` expects one checked out through
`shop.store.checkout()` and raises `NotFound` or `OperationFailure`; the
caller owns the release.
"""

import logging
import math
import re

from sqlalchemy import delete, select, update

from shop.errors import NotFound, ValidationFailure
from shop.models import Product
from shop.store import operation

logger = logging.getLogger(__name__)

PRODUCT_FIELDS = ('code', 'name', 'price', 'category')
_INTEGER = re.compile(r'[+-]?[0-9]+')

# SQLite INTEGER is a signed 64-bit value
MIN_STORE_INTEGER = -2 ** 63
MAX_STORE_INTEGER = 2 ** 63 - 1


def parse_product_id(raw):
    """Parse a route or query id.

    Only base-10 integers are accepted; there is no default id. An id the
    store cannot hold cannot match any product.

    Raises:
        ValidationFailure: if `raw` is missing or not an integer.
        NotFound: if the id is outside the store's integer range.
    """
    if raw is None:
        raise ValidationFailure('A product id is required')
    text = str(raw).strip()
    if not _INTEGER.fullmatch(text):
        raise ValidationFailure(f'Invalid product id: {raw}')
    try:
        product_id = int(text)
    except ValueError:
        # longer than the interpreter's int string limit
        raise NotFound(f'Product not found with id {text}')
    if not MIN_STORE_INTEGER <= product_id <= MAX_STORE_INTEGER:
        raise NotFound(f'Product not found with id {text}')
    return product_id


def _parse_code(raw):
    try:
        code = int(raw)
    except (TypeError, ValueError):
        raise ValidationFailure(f'Product code must be an integer: {raw}')
    if not MIN_STORE_INTEGER <= code <= MAX_STORE_INTEGER:
        raise ValidationFailure(f'Product code is out of range: {raw}')
    return code


def _parse_price(raw):
    try:
        price = float(raw)
    except (TypeError, ValueError):
        raise ValidationFailure(f'Product price must be a number: {raw}')
    if not math.isfinite(price):
        raise ValidationFailure(f'Product price must be a finite number: {raw}')
    return price


def parse_product_fields(form, partial=False):
    """Convert submitted form fields into typed product values.

    With `partial` only the non-empty fields are returned (used for
    updates); otherwise all of code, name, price and category are required.
    """
    values = {}
    for field in PRODUCT_FIELDS:
        raw = form.get(field)
        if raw is not None:
            raw = raw.strip()
        if not raw:
            if partial:
                continue
            raise ValidationFailure(f'Missing product field: {field}')
        if field == 'code':
            values[field] = _parse_code(raw)
        elif field == 'price':
            values[field] = _parse_price(raw)
        else:
            values[field] = raw

    if not values:
        raise ValidationFailure('No product fields to update')
    return values


def build_filter_query(args):
    """Build the lookup for the filter route from its query string.

    `id` wins when present and must be an integer. `productNombre` is
    accepted as an alias of `name`. A numeric name is looked up as an id,
    any other name is matched exactly.

    Returns:
        (column, value, description) tuple.

    Raises:
        ValidationFailure: if neither parameter is present.
    """
    raw_id = (args.get('id') or '').strip()
    name = (args.get('name') or args.get('productNombre') or '').strip()

    if raw_id:
        product_id = parse_product_id(raw_id)
        return Product.id, product_id, f'id {product_id}'
    if name:
        if _INTEGER.fullmatch(name):
            product_id = parse_product_id(name)
            return Product.id, product_id, f'id {product_id}'
        return Product.name, name, f'name {name}'
    raise ValidationFailure('Either a product id or a product name must be provided.')


def list_products(session):
    with operation(session, 'fetching the products'):
        return session.scalars(select(Product).order_by(Product.id)).all()


def get_product(session, product_id):
    """Find one product by id.

    Raises:
        NotFound: if no product has this id.
    """
    with operation(session, 'fetching the product'):
        product = session.get(Product, product_id)
    if product is None:
        raise NotFound(f'Product not found with id {product_id}')
    return product


def find_product(session, column, value, description):
    with operation(session, 'fetching the product'):
        product = session.scalars(select(Product).where(column == value).limit(1)).first()
    if product is None:
        raise NotFound(f'Product not found with {description}')
    return product


def add_product(session, values):
    """Insert a product; the store assigns its id."""
    product = Product(**values)
    with operation(session, 'adding the new product'):
        session.add(product)
        session.commit()
    logger.info('New product added with id %s', product.id)
    return product


def update_product(session, product_id, values):
    """Set `values` on the product with this id.

    Raises:
        NotFound: if no product matched.
    """
    with operation(session, 'updating the product'):
        result = session.execute(
            update(Product).where(Product.id == product_id).values(**values)
        )
        session.commit()
    if result.rowcount == 0:
        raise NotFound(f'Product not found with id {product_id}')
    logger.info('Updated product %s: %s', product_id, ', '.join(sorted(values)))


def delete_product(session, product_id):
    """Delete the product with this id.

    Raises:
        NotFound: if nothing was deleted.
    """
    with operation(session, 'deleting the product'):
        result = session.execute(delete(Product).where(Product.id == product_id))
        session.commit()
    if result.rowcount == 0:
        raise NotFound(f'Product not found with id {product_id}')
    logger.info('Deleted product %s', product_id)
