"""
Request Errors

Every failure of a product request ends the request: the handler raises one
of these and the registered error handler turns it into a plain-text
response carrying the matching status code.
"""

import logging

logger = logging.getLogger(__name__)


class ShopError(Exception):
    """Base class for failures that terminate a request."""
    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ConnectionFailure(ShopError):
    """The product store could not be reached."""
    status_code = 500
    default_message = 'Error connecting to the product store'


class NotFound(ShopError):
    """No document matched the identifier."""
    status_code = 404
    default_message = 'Product not found'


class ValidationFailure(ShopError):
    """A required route, query or body parameter is missing or malformed."""
    status_code = 400
    default_message = 'Invalid request parameters'


class OperationFailure(ShopError):
    """The store raised while running a find, insert, update or delete."""
    status_code = 500
    default_message = 'Error running the operation on the collection (productos)'


def register_error_handlers(app):
    """Map every ShopError to a plain-text response."""

    @app.errorhandler(ShopError)
    def handle_shop_error(error):
        if error.status_code >= 500:
            logger.error('%s: %s', type(error).__name__, error.message)
        else:
            logger.info('%s: %s', type(error).__name__, error.message)
        return error.message, error.status_code, {'Content-Type': 'text/plain; charset=utf-8'}
