"""Static product catalog.

Barcodes are the key to matching products across store files. Weighed
produce uses in-store codes starting with ``2``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from price_checker.catalog.models import CatalogProduct
from price_checker.schemas.enums import Category


if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

KG: Final[str] = '1 ק"ג'


PRODUCT_CATALOG: Final[tuple[CatalogProduct, ...]] = (
    # Vegetables
    CatalogProduct(
        id="1",
        name="Tomatoes",
        name_hebrew="עגבניות",
        category=Category.VEGETABLES,
        unit=KG,
        image="🍅",
        identifiers=("2000010000002", "2000011000001"),
        search_terms=("עגבניות", "עגבניה", "tomato"),
    ),
    CatalogProduct(
        id="2",
        name="Cucumbers",
        name_hebrew="מלפפונים",
        category=Category.VEGETABLES,
        unit=KG,
        image="🥒",
        identifiers=("2000020000001",),
        search_terms=("מלפפון", "מלפפונים", "cucumber"),
    ),
    CatalogProduct(
        id="3",
        name="Potatoes",
        name_hebrew="תפוחי אדמה",
        category=Category.VEGETABLES,
        unit=KG,
        image="🥔",
        identifiers=("2000030000000",),
        search_terms=("תפוח אדמה", "תפוחי אדמה", "potato"),
    ),
    CatalogProduct(
        id="4",
        name="Onions",
        name_hebrew="בצל",
        category=Category.VEGETABLES,
        unit=KG,
        image="🧅",
        identifiers=("2000040000009",),
        search_terms=("בצל", "onion"),
    ),
    CatalogProduct(
        id="5",
        name="Carrots",
        name_hebrew="גזר",
        category=Category.VEGETABLES,
        unit=KG,
        image="🥕",
        identifiers=("2000050000008",),
        search_terms=("גזר", "carrot"),
    ),
    CatalogProduct(
        id="6",
        name="Bell Pepper",
        name_hebrew="פלפל",
        category=Category.VEGETABLES,
        unit=KG,
        image="🫑",
        identifiers=("2000060000007",),
        search_terms=("פלפל", "pepper"),
    ),
    CatalogProduct(
        id="7",
        name="Lettuce",
        name_hebrew="חסה",
        category=Category.VEGETABLES,
        unit="יחידה",
        image="🥬",
        identifiers=("2000070000006",),
        search_terms=("חסה", "lettuce"),
    ),
    # Fruits
    CatalogProduct(
        id="8",
        name="Apples",
        name_hebrew="תפוחים",
        category=Category.FRUITS,
        unit=KG,
        image="🍎",
        identifiers=("2000080000005",),
        search_terms=("תפוח", "תפוחים", "apple"),
    ),
    CatalogProduct(
        id="9",
        name="Bananas",
        name_hebrew="בננות",
        category=Category.FRUITS,
        unit=KG,
        image="🍌",
        identifiers=("2000090000004",),
        search_terms=("בננה", "בננות", "banana"),
    ),
    CatalogProduct(
        id="10",
        name="Oranges",
        name_hebrew="תפוזים",
        category=Category.FRUITS,
        unit=KG,
        image="🍊",
        identifiers=("2000100000003",),
        search_terms=("תפוז", "תפוזים", "orange"),
    ),
    CatalogProduct(
        id="11",
        name="Grapes",
        name_hebrew="ענבים",
        category=Category.FRUITS,
        unit=KG,
        image="🍇",
        identifiers=("2000110000002",),
        search_terms=("ענבים", "ענב", "grape"),
    ),
    CatalogProduct(
        id="12",
        name="Watermelon",
        name_hebrew="אבטיח",
        category=Category.FRUITS,
        unit=KG,
        image="🍉",
        identifiers=("2000120000001",),
        search_terms=("אבטיח", "watermelon"),
    ),
    # Dairy & eggs
    CatalogProduct(
        id="13",
        name="Milk 3%",
        name_hebrew="חלב 3%",
        category=Category.DAIRY_AND_EGGS,
        unit="1 ליטר",
        image="🥛",
        identifiers=("7290000066318", "7290000066325", "7290102990017"),
        search_terms=("חלב", "milk", "3%"),
    ),
    CatalogProduct(
        id="14",
        name="Eggs",
        name_hebrew="ביצים",
        category=Category.DAIRY_AND_EGGS,
        unit="12 יחידות",
        image="🥚",
        identifiers=("7290000129617", "7290000129624"),
        search_terms=("ביצים", "ביצה", "eggs", "תריסר"),
    ),
    CatalogProduct(
        id="15",
        name="Cottage Cheese",
        name_hebrew="קוטג'",
        category=Category.DAIRY_AND_EGGS,
        unit="250 גרם",
        image="🧀",
        identifiers=("7290000051234", "7290000051241"),
        search_terms=("קוטג", "cottage", "גבינה לבנה"),
    ),
    CatalogProduct(
        id="16",
        name="Yellow Cheese",
        name_hebrew="גבינה צהובה",
        category=Category.DAIRY_AND_EGGS,
        unit="200 גרם",
        image="🧀",
        identifiers=("7290000078231", "7290000078248"),
        search_terms=("גבינה צהובה", "עמק", "cheese"),
    ),
    CatalogProduct(
        id="17",
        name="Butter",
        name_hebrew="חמאה",
        category=Category.DAIRY_AND_EGGS,
        unit="200 גרם",
        image="🧈",
        identifiers=("7290000045678",),
        search_terms=("חמאה", "butter"),
    ),
    # Bread & bakery
    CatalogProduct(
        id="18",
        name="White Bread",
        name_hebrew="לחם לבן",
        category=Category.BREAD_AND_BAKERY,
        unit="יחידה",
        image="🍞",
        identifiers=("7290000123456", "7290008700016"),
        search_terms=("לחם לבן", "לחם", "bread", "אנג'ל"),
    ),
    CatalogProduct(
        id="19",
        name="Pita",
        name_hebrew="פיתה",
        category=Category.BREAD_AND_BAKERY,
        unit="6 יחידות",
        image="🫓",
        identifiers=("7290000234567",),
        search_terms=("פיתה", "פיתות", "pita"),
    ),
    CatalogProduct(
        id="20",
        name="Challah",
        name_hebrew="חלה",
        category=Category.BREAD_AND_BAKERY,
        unit="יחידה",
        image="🍞",
        identifiers=("7290000345678",),
        search_terms=("חלה", "challah"),
    ),
    # Meat & poultry
    CatalogProduct(
        id="21",
        name="Chicken Breast",
        name_hebrew="חזה עוף",
        category=Category.MEAT_AND_POULTRY,
        unit=KG,
        image="🍗",
        identifiers=("2000210000005",),
        search_terms=("חזה עוף", "עוף", "chicken breast"),
    ),
    CatalogProduct(
        id="22",
        name="Ground Beef",
        name_hebrew="בשר טחון",
        category=Category.MEAT_AND_POULTRY,
        unit=KG,
        image="🥩",
        identifiers=("2000220000004",),
        search_terms=("בשר טחון", "ground beef", "בקר טחון"),
    ),
    CatalogProduct(
        id="23",
        name="Chicken Thighs",
        name_hebrew="ירכיים עוף",
        category=Category.MEAT_AND_POULTRY,
        unit=KG,
        image="🍗",
        identifiers=("2000230000003",),
        search_terms=("ירכיים", "ירך עוף", "chicken thigh"),
    ),
    # Fish
    CatalogProduct(
        id="24",
        name="Salmon Fillet",
        name_hebrew="פילה סלמון",
        category=Category.FISH,
        unit=KG,
        image="🐟",
        identifiers=("2000240000002",),
        search_terms=("סלמון", "salmon", "פילה"),
    ),
    CatalogProduct(
        id="25",
        name="Tilapia",
        name_hebrew="אמנון",
        category=Category.FISH,
        unit=KG,
        image="🐟",
        identifiers=("2000250000001",),
        search_terms=("אמנון", "tilapia", "דג"),
    ),
    # Canned goods
    CatalogProduct(
        id="26",
        name="Tuna Can",
        name_hebrew="טונה",
        category=Category.CANNED_GOODS,
        unit="160 גרם",
        image="🥫",
        identifiers=("7290000567890", "7290000567891"),
        search_terms=("טונה", "tuna", "שימורים"),
    ),
    CatalogProduct(
        id="27",
        name="Corn Can",
        name_hebrew="תירס",
        category=Category.CANNED_GOODS,
        unit="400 גרם",
        image="🌽",
        identifiers=("7290000678901",),
        search_terms=("תירס", "corn", "שימורים"),
    ),
    CatalogProduct(
        id="28",
        name="Chickpeas",
        name_hebrew="חומוס",
        category=Category.CANNED_GOODS,
        unit="400 גרם",
        image="🥫",
        identifiers=("7290000789012",),
        search_terms=("חומוס", "גרגירי חומוס", "chickpeas"),
    ),
    # Beverages
    CatalogProduct(
        id="29",
        name="Coca Cola",
        name_hebrew="קוקה קולה",
        category=Category.BEVERAGES,
        unit="1.5 ליטר",
        image="🥤",
        identifiers=("5000112611779", "5449000000996", "5449000214591"),
        search_terms=("קוקה קולה", "קולה", "coca cola", "coke"),
    ),
    CatalogProduct(
        id="30",
        name="Orange Juice",
        name_hebrew="מיץ תפוזים",
        category=Category.BEVERAGES,
        unit="1 ליטר",
        image="🧃",
        identifiers=("7290000890123", "7290000890124"),
        search_terms=("מיץ תפוזים", "מיץ", "orange juice", "פריגת"),
    ),
    CatalogProduct(
        id="31",
        name="Mineral Water",
        name_hebrew="מים מינרלים",
        category=Category.BEVERAGES,
        unit="1.5 ליטר",
        image="💧",
        identifiers=("7290000901234", "7290000901235"),
        search_terms=("מים", "מינרלים", "נביעות", "water"),
    ),
    # Snacks
    CatalogProduct(
        id="32",
        name="Bamba",
        name_hebrew="במבה",
        category=Category.SNACKS,
        unit="80 גרם",
        image="🥜",
        identifiers=("7290000012346", "7290000012353"),
        search_terms=("במבה", "bamba", "אוסם"),
    ),
    CatalogProduct(
        id="33",
        name="Bissli",
        name_hebrew="ביסלי",
        category=Category.SNACKS,
        unit="70 גרם",
        image="🍿",
        identifiers=("7290000023456", "7290000023463"),
        search_terms=("ביסלי", "bissli", "אוסם"),
    ),
    # Cleaning
    CatalogProduct(
        id="34",
        name="Dish Soap",
        name_hebrew="סבון כלים",
        category=Category.CLEANING,
        unit='750 מ"ל',
        image="🧴",
        identifiers=("7290000345678", "7290000345679"),
        search_terms=("סבון כלים", "נוזל כלים", "dish soap", "פיירי"),
    ),
    CatalogProduct(
        id="35",
        name="Laundry Detergent",
        name_hebrew="אבקת כביסה",
        category=Category.CLEANING,
        unit='3 ק"ג',
        image="🧺",
        identifiers=("7290000456789", "7290000456790"),
        search_terms=("אבקת כביסה", "כביסה", "laundry", "סנו"),
    ),
)


_BY_ID: Final[Mapping[str, CatalogProduct]] = MappingProxyType(
    {product.id: product for product in PRODUCT_CATALOG}
)


def get_catalog_product(
    product_id: str,
    catalog: Sequence[CatalogProduct] = PRODUCT_CATALOG,
) -> CatalogProduct | None:
    """Look up a product by id in ``catalog`` (the built-in catalog by default)."""
    if catalog is PRODUCT_CATALOG:
        return _BY_ID.get(product_id)
    return next((p for p in catalog if p.id == product_id), None)
