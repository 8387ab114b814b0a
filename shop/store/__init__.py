"""
Store Package

Per-request access to the product store.
"""

from shop.store.gateway import connect, disconnect, checkout, operation

__all__ = ['connect', 'disconnect', 'checkout', 'operation']
