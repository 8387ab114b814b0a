import pytest

from shop import create_app
from shop.config import TestConfig
from shop.products.services import add_product
from shop.store import checkout


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def logged_in_client(client):
    client.post('/register', data={'username': 'tester', 'password': 'secret'})
    r = client.post('/login', data={'username': 'tester', 'password': 'secret'})
    assert r.status_code == 200
    return client


@pytest.fixture()
def seeded_products(app):
    """Insert two products and return their ids."""
    with app.app_context():
        with checkout() as store:
            apple = add_product(store, {'code': 101, 'name': 'Apple', 'price': 1.25, 'category': 'Fruit'})
            bread = add_product(store, {'code': 202, 'name': 'Bread', 'price': 2.5, 'category': 'Bakery'})
            return [apple.id, bread.id]
