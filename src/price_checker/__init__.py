"""Grocery price checker service.

Aggregates a retailer's price-transparency files into market price ranges
for a curated product catalog and rates observed shelf prices against them.
"""

__version__ = "0.1.0"
