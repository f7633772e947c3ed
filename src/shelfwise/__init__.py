"""SHELFWISE

Shelf-life acceptance rules for packaged food shipments.
It resolves the last day a distribution center may accept a delivery and the
last day a store may keep it on shelf, from a product's expiry date and its
total shelf-life.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
