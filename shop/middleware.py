"""
Method Override Middleware

HTML forms can only submit GET and POST. A POST whose query string carries
`_method=PATCH` (or PUT / DELETE) is dispatched as that method instead.
"""

from urllib.parse import parse_qs

OVERRIDABLE_METHODS = frozenset(['PUT', 'PATCH', 'DELETE'])


class MethodOverrideMiddleware:
    """WSGI middleware rewriting REQUEST_METHOD from `?_method=`"""

    def __init__(self, app, param='_method'):
        self.app = app
        self.param = param

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            query = parse_qs(environ.get('QUERY_STRING', ''))
            method = (query.get(self.param) or [''])[0].upper()
            if method in OVERRIDABLE_METHODS:
                environ['REQUEST_METHOD'] = method
        return self.app(environ, start_response)
