"""
Page objects for the store: locators and interactions, one class per page or region
"""

from .accessories_dialog import ProductAccessoriesDialog
from .cart_page import CartPage
from .global_header import StoreGlobalHeader
from .home_page import StoreHomePage

__all__ = [
    'ProductAccessoriesDialog',
    'CartPage',
    'StoreGlobalHeader',
    'StoreHomePage'
]
