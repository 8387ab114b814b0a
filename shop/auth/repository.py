"""
User Repository

In-memory user storage shared by every request of the process. Register
requests may arrive concurrently, so all access goes through a lock.
"""

import logging
import threading

from flask import current_app
from werkzeug.security import generate_password_hash

from shop.models import User

logger = logging.getLogger(__name__)


class DuplicateUsername(Exception):
    """Raised when registering a username that already exists."""


class InMemoryUserRepository:
    """Lock-guarded mapping of username to User"""

    def __init__(self):
        self._users = {}
        self._lock = threading.Lock()

    def insert(self, username, password):
        """Store a new user and return it.

        Raises:
            DuplicateUsername: if the username is already taken.
        """
        user = User(username, generate_password_hash(password, method='pbkdf2:sha256'))
        with self._lock:
            if username in self._users:
                raise DuplicateUsername(username)
            self._users[username] = user
        logger.info('Registered user %s', username)
        return user

    def find_by_credentials(self, username, password):
        """Return the user matching both username and password, else None."""
        with self._lock:
            user = self._users.get(username)
        if user is not None and user.check_password(password):
            return user
        return None

    def get(self, user_id):
        with self._lock:
            return self._users.get(user_id)

    def __len__(self):
        with self._lock:
            return len(self._users)


def get_user_repository():
    """Return the repository bound to the current application."""
    return current_app.extensions['user_repository']
