"""
Configuration settings for the Ecomerce product catalog
"""
import os
from datetime import timedelta


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Session cookie lifetime (seconds)
    SESSION_TTL_SECONDS = int(os.environ.get('SESSION_TTL_SECONDS') or 60)
    PERMANENT_SESSION_LIFETIME = timedelta(seconds=SESSION_TTL_SECONDS)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = False

    # Store configuration: database "Ecomerce", collection "productos"
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'Ecomerce.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server settings
    PORT = int(os.environ.get('PORT') or 5000)
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'DEBUG'
