"""
Product Store Gateway

Opens and releases store sessions for a single request. Sessions draw their
connection from the engine pool managed by Flask-SQLAlchemy, so `connect`
checks a connection out and `disconnect` hands it back.
"""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shop.errors import ConnectionFailure, OperationFailure
from shop.extensions import db

logger = logging.getLogger(__name__)


def connect():
    """Check out a store session.

    Returns:
        An open `Session` holding a pooled connection, or None when the
        store cannot be reached. Never raises.
    """
    session = None
    try:
        session = Session(db.engine, expire_on_commit=False)
        session.connection()
    except SQLAlchemyError as e:
        logger.error('Error connecting to the product store: %s', e)
        if session is not None:
            disconnect(session)
        return None
    logger.debug('Store connection checked out')
    return session


def disconnect(session):
    """Release a session and its connection. Failures are only logged."""
    try:
        session.close()
        logger.debug('Store connection released')
    except SQLAlchemyError as e:
        logger.error('Error disconnecting from the product store: %s', e)


@contextmanager
def checkout():
    """Scoped store access for one request.

    Raises:
        ConnectionFailure: if no connection could be acquired.

    The session is released on every exit path, including errors raised by
    the caller inside the block.
    """
    session = connect()
    if session is None:
        raise ConnectionFailure()
    try:
        yield session
    finally:
        disconnect(session)


@contextmanager
def operation(session, label):
    """Run one store operation, mapping driver errors to OperationFailure.

    `label` describes the failed operation in the error message, e.g.
    "updating the product".
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception('Store operation failed while %s', label)
        session.rollback()
        raise OperationFailure(f'Error {label} in the collection (productos)') from e
