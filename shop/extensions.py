"""
Flask Extensions

The product collection lives in the SQL store behind `db`; users are kept
in memory and only their ids travel in the session cookie.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for session authentication
login_manager = LoginManager()
