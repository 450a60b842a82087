"""Firestore collection names.

Firestore creates collections on first write, so these constants are the
only place the layout of the store is spelled out.
"""

ORDERS = "orders"
PRODUCTS = "products"
CARTS = "carts"
USERS = "users"
SEARCH_INDEX = "search_index"
