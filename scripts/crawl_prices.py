"""Crawl retailer price files and write a static JSON price file.

Run with: python scripts/crawl_prices.py --output data/prices.json
"""

import sys

from price_checker.cli import main


if __name__ == "__main__":
    sys.exit(main())
