import json
import logging

import pytest
from sqlalchemy.exc import OperationalError

import shop.store.gateway as gateway
from shop.commands import normalize_document, seed_products_command
from shop.errors import ConnectionFailure, NotFound, OperationFailure
from shop.products.services import get_product, list_products


class UnreachableSession:
    closed = False

    def __init__(self, *args, **kwargs):
        pass

    def connection(self):
        raise OperationalError('connect', {}, Exception('unreachable'))

    def close(self):
        UnreachableSession.closed = True


class BrokenCloseSession:
    def close(self):
        raise OperationalError('close', {}, Exception('socket gone'))


def test_connect_returns_session(app):
    with app.app_context():
        session = gateway.connect()
        assert session is not None
        gateway.disconnect(session)


def test_connect_returns_none_when_unreachable(app, monkeypatch, caplog):
    monkeypatch.setattr(gateway, 'Session', UnreachableSession)
    with app.app_context(), caplog.at_level(logging.ERROR, logger='shop.store.gateway'):
        assert gateway.connect() is None
    assert UnreachableSession.closed
    assert 'Error connecting' in caplog.text


def test_disconnect_logs_instead_of_raising(caplog):
    with caplog.at_level(logging.ERROR, logger='shop.store.gateway'):
        gateway.disconnect(BrokenCloseSession())
    assert 'Error disconnecting' in caplog.text


def test_checkout_raises_connection_failure(app, monkeypatch):
    monkeypatch.setattr(gateway, 'connect', lambda: None)
    with app.app_context():
        with pytest.raises(ConnectionFailure):
            with gateway.checkout():
                pytest.fail('block must not run without a connection')


def test_checkout_releases_after_error(app, monkeypatch):
    released = []
    monkeypatch.setattr(gateway, 'disconnect', released.append)
    with app.app_context():
        with pytest.raises(NotFound):
            with gateway.checkout() as store:
                get_product(store, 12345)
    assert len(released) == 1


def test_operation_maps_driver_errors(app):
    with app.app_context():
        with gateway.checkout() as store:
            with pytest.raises(OperationFailure) as excinfo:
                with gateway.operation(store, 'updating the product'):
                    raise OperationalError('update', {}, Exception('boom'))
    assert excinfo.value.status_code == 500
    assert 'updating the product' in excinfo.value.message


def test_normalize_document_accepts_spanish_fields():
    form = normalize_document({'id': 9, 'codigo': 12, 'nombre': 'Queso', 'precio': 3.5, 'categoria': 'Lacteos'})
    assert form == {'code': '12', 'name': 'Queso', 'price': '3.5', 'category': 'Lacteos'}


def test_seed_products_command(app, tmp_path):
    fixture = tmp_path / 'supermercado.json'
    fixture.write_text(json.dumps([
        {'id': 1, 'codigo': 1, 'nombre': 'Arroz', 'precio': 1.2, 'categoria': 'Despensa'},
        {'code': 2, 'name': 'Salt', 'price': 0.5, 'category': 'Pantry'},
        {'name': 'Incomplete'},
    ]), encoding='utf-8')

    result = app.test_cli_runner().invoke(seed_products_command, [str(fixture)])
    assert result.exit_code == 0
    assert 'Added 2 of 3 products' in result.output

    with app.app_context():
        with gateway.checkout() as store:
            names = [p.name for p in list_products(store)]
    assert names == ['Arroz', 'Salt']
