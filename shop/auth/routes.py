"""
Auth Routes

Registration, login and logout. Users live in the in-memory repository;
the session only carries the user id and expires with the cookie.
"""

import logging

from flask import render_template, request, flash, session
from flask_login import login_user, logout_user

from shop.auth import auth_bp
from shop.auth.repository import DuplicateUsername, get_user_repository
from shop.products.services import list_products
from shop.store import checkout

logger = logging.getLogger(__name__)


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    """User registration route"""
    if request.method == 'POST':
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '')

        if not username or not password:
            flash('Please provide both username and password.', 'danger')
            return render_template('auth/register.html')

        try:
            get_user_repository().insert(username, password)
        except DuplicateUsername:
            flash('Username already taken. Please choose another.', 'danger')
            return render_template('auth/register.html')

        flash('Registration successful! Please login.', 'success')
        return render_template('auth/login.html')

    return render_template('auth/register.html')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route; renders the product list on success"""
    if request.method == 'POST':
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '')

        user = get_user_repository().find_by_credentials(username, password)
        if user is None:
            logger.info('Failed login for %s', username)
            flash('Invalid username or password. Please try again.', 'danger')
            return render_template('auth/login.html')

        session.permanent = True
        login_user(user)
        logger.info('User %s logged in', username)

        with checkout() as store:
            products = list_products(store)
        return render_template('products/list.html', products=products)

    return render_template('auth/login.html')


@auth_bp.route('/logout')
def logout():
    """Destroy the session"""
    logout_user()
    session.clear()
    return 'User logged out', 200, {'Content-Type': 'text/plain; charset=utf-8'}
