"""Construcción del catálogo anidado a partir de filas planas.

- La salida siempre tiene una posición por categoría de CATEGORY_ORDER.
- Una categoría de la lista sin filas deja None en su posición.
- Una categoría fuera de la lista no aparece en ninguna parte.
- Marcas y productos conservan el orden de primera aparición.
- El precio se formatea con exactamente dos decimales.
"""

from decimal import Decimal

import pytest

from beautyshop.services.catalog_builder import (
    CATEGORY_ORDER,
    build_catalog,
    build_item,
    format_price,
    group_by_category,
)


def _row(category, brand, title, price="10.00", image_url="https://cdn.test/x.jpg", info=""):
    return {
        "id": 1,
        "category_name": category,
        "brand_name": brand,
        "title": title,
        "price": price,
        "image_url": image_url,
        "info": info,
    }


@pytest.mark.parametrize(
    "price, expected",
    [
        (19.5, "19.50"),
        (19.999, "20.00"),
        (Decimal("19.999"), "20.00"),
        (Decimal("7"), "7.00"),
        ("3.1", "3.10"),
        (0, "0.00"),
        (0.125, "0.13"),
        (0.625, "0.63"),
        (Decimal("2.675"), "2.67"),
        (1.005, "1.00"),
    ],
)
def test_format_price_two_decimals(price, expected):
    assert format_price(price) == expected


def test_build_item_shape():
    item = build_item(_row("Hair Products", "Silk Roots", "Shampoo", Decimal("12.5"), "https://cdn.test/s.jpg", "250 ml"))
    assert item == {
        "title": "Shampoo",
        "price": "12.50",
        "image": {"fields": {"file": {"url": "https://cdn.test/s.jpg"}}},
        "info": "250 ml",
    }


def test_missing_preferred_category_leaves_gap():
    rows = [
        _row("Hair Products", "Silk Roots", "Shampoo"),
        _row("Accessories", "Brushworks", "Brush"),
        _row("Skin Care Products", "Glow Lab", "Serum"),
    ]

    categories = build_catalog(rows)["categories"]

    assert len(categories) == 4
    assert [c["name"] if c else None for c in categories] == [
        "Skin Care Products", "Hair Products", None, "Accessories",
    ]
    assert categories[2] is None


def test_unlisted_category_is_dropped():
    rows = [
        _row("Seasonal", "Holiday Co", "Gift Box"),
        _row("Hair Products", "Silk Roots", "Shampoo"),
    ]

    result = build_catalog(rows)

    assert "Seasonal" not in repr(result)
    assert "Gift Box" not in repr(result)
    assert result["categories"][1]["name"] == "Hair Products"


def test_empty_rows_give_all_gaps():
    assert build_catalog([]) == {"categories": [None] * len(CATEGORY_ORDER)}


def test_groups_by_name_in_first_seen_order():
    rows = [
        _row("Skin Care Products", "Pure Derm", "Night Cream"),
        _row("Skin Care Products", "Glow Lab", "Serum"),
        _row("Skin Care Products", "Pure Derm", "Day Cream"),
        _row("Skin Care Products", "Glow Lab", "Toner"),
    ]

    skin = build_catalog(rows)["categories"][0]

    assert list(skin["brands"]) == ["Pure Derm", "Glow Lab"]
    assert skin["brands"]["Pure Derm"]["name"] == "Pure Derm"
    assert [i["title"] for i in skin["brands"]["Pure Derm"]["items"]] == ["Night Cream", "Day Cream"]
    assert [i["title"] for i in skin["brands"]["Glow Lab"]["items"]] == ["Serum", "Toner"]


def test_same_brand_name_in_two_categories_is_kept_apart():
    rows = [
        _row("Hair Products", "Everyday", "Shampoo"),
        _row("Make-Up Products", "Everyday", "Lipstick"),
    ]

    categories = build_catalog(rows)["categories"]

    assert [i["title"] for i in categories[1]["brands"]["Everyday"]["items"]] == ["Shampoo"]
    assert [i["title"] for i in categories[2]["brands"]["Everyday"]["items"]] == ["Lipstick"]


def test_group_by_category_keeps_unlisted_categories():
    grouped = group_by_category([_row("Seasonal", "Holiday Co", "Gift Box")])
    assert list(grouped) == ["Seasonal"]


def test_custom_category_order():
    rows = [_row("Hair Products", "Silk Roots", "Shampoo")]
    result = build_catalog(rows, category_order=["Hair Products"])
    assert result["categories"][0]["name"] == "Hair Products"
    assert len(result["categories"]) == 1
