"""
User Model

Users are not persisted; they live in the user repository for the
lifetime of the process.
"""

from flask_login import UserMixin
from werkzeug.security import check_password_hash


class User(UserMixin):
    """Registered shop user"""

    def __init__(self, username, password_hash):
        self.username = username
        self.password_hash = password_hash

    @property
    def id(self):
        # usernames are unique, so they double as the session id
        return self.username

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<User {self.username}>'
