"""
CLI Commands

    flask --app app seed-products supermercado.json
"""

import json
import logging

import click
from flask.cli import with_appcontext

from shop.errors import ValidationFailure
from shop.products.services import add_product, parse_product_fields
from shop.store import checkout

logger = logging.getLogger(__name__)

# Fixture files may use the Spanish field names of the original catalog
FIELD_ALIASES = {
    'codigo': 'code',
    'nombre': 'name',
    'precio': 'price',
    'categoria': 'category',
}


def normalize_document(document):
    """Map a fixture document onto the product form fields, as strings."""
    form = {}
    for key, value in document.items():
        field = FIELD_ALIASES.get(key, key)
        if value is not None:
            form[field] = str(value)
    # ids are assigned by the store
    form.pop('id', None)
    return form


@click.command('seed-products')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@with_appcontext
def seed_products_command(path):
    """Load a JSON array of products into the collection."""
    with open(path, encoding='utf-8') as f:
        documents = json.load(f)

    if not isinstance(documents, list):
        raise click.ClickException('Expected a JSON array of products')

    added = 0
    with checkout() as store:
        for position, document in enumerate(documents):
            try:
                add_product(store, parse_product_fields(normalize_document(document)))
            except ValidationFailure as e:
                logger.warning('Skipping document %s: %s', position, e.message)
                continue
            added += 1

    click.echo(f'Added {added} of {len(documents)} products')


def register_commands(app):
    app.cli.add_command(seed_products_command)
