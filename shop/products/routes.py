"""
Product Routes

Every store-backed route runs the same lifecycle: the login guard, a store
checkout, parameter parsing, one store operation, then render. Failures
raise a ShopError and the checkout is released on every path.
"""

from flask import render_template, request, redirect, url_for
from flask_login import login_required

from shop.products import products_bp
from shop.products.services import (
    add_product,
    build_filter_query,
    delete_product,
    find_product,
    get_product,
    list_products,
    parse_product_fields,
    parse_product_id,
    update_product,
)
from shop.store import checkout


@products_bp.route('/')
def index():
    return render_template('index.html')


@products_bp.route('/products')
@login_required
def products():
    """List every product"""
    with checkout() as store:
        items = list_products(store)
        return render_template('products/list.html', products=items)


@products_bp.route('/products/<product_id>')
@login_required
def product_detail(product_id):
    with checkout() as store:
        product = get_product(store, parse_product_id(product_id))
        return render_template('products/detail.html', product=product)


@products_bp.route('/product/filterProducto')
@login_required
def filter_product():
    """
    Find a single product by id or by name.

    Query Parameters:
        id: product id (integer)
        name: exact product name; a numeric name is treated as an id
    """
    with checkout() as store:
        column, value, description = build_filter_query(request.args)
        product = find_product(store, column, value, description)
        return render_template('products/detail.html', product=product)


@products_bp.route('/products/add')
@products_bp.route('/product/add')
@login_required
def add_form():
    return render_template('products/add.html')


@products_bp.route('/products/add', methods=['POST'])
@login_required
def create_product():
    """Insert a product; its id is assigned by the store"""
    with checkout() as store:
        values = parse_product_fields(request.form)
        add_product(store, values)
    return redirect(url_for('products.products'))


@products_bp.route('/products/edit/<product_id>')
@login_required
def edit_form(product_id):
    with checkout() as store:
        product = get_product(store, parse_product_id(product_id))
        return render_template('products/edit.html', product=product)


@products_bp.route('/products/<product_id>', methods=['PATCH'])
@login_required
def edit_product(product_id):
    """Set the submitted fields on one product, then show the list"""
    with checkout() as store:
        product_id = parse_product_id(product_id)
        values = parse_product_fields(request.form, partial=True)
        update_product(store, product_id, values)
        items = list_products(store)
        return render_template('products/list.html', products=items)


@products_bp.route('/products/<product_id>', methods=['DELETE'])
@login_required
def remove_product(product_id):
    with checkout() as store:
        delete_product(store, parse_product_id(product_id))
        items = list_products(store)
        return render_template('products/list.html', products=items)
