"""
ShopList - categorised shopping list with restorable history
"""

__version__ = "1.0.0"
