# backend/beautyshop/services/catalog_builder.py

"""
Construcción de la vista anidada del catálogo.

Convierte las filas planas de la consulta de catálogo (una fila por
producto, con el nombre de su marca y de su categoría) en el árbol
categoría → marca → productos que consume el frontend.

Reglas:
- Se agrupa por nombre, no por ID.
- Dentro de cada nivel se conserva el orden de primera aparición en las filas.
- El resultado final sigue CATEGORY_ORDER: una categoría de la lista sin
  productos deja un None en su posición, y una categoría que no está en la
  lista no aparece en la respuesta.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional

# Orden en el que el frontend muestra las secciones de la tienda
CATEGORY_ORDER = [
    "Skin Care Products",
    "Hair Products",
    "Make-Up Products",
    "Accessories",
]

_CENT = Decimal("0.01")


def format_price(price: Any) -> str:
    """
    Formatea un precio como cadena de punto fijo con dos decimales.

    Se redondea el valor binario del float con empates hacia arriba, igual
    que Number.prototype.toFixed(2) en JavaScript.

    >>> format_price(19.5)
    '19.50'
    >>> format_price("19.999")
    '20.00'
    >>> format_price(0.125)
    '0.13'
    """
    return f"{Decimal(float(price)).quantize(_CENT, rounding=ROUND_HALF_UP):f}"


def build_item(row: Mapping[str, Any]) -> Dict[str, Any]:
    """Nodo de producto: título, precio formateado, imagen e info."""
    return {
        "title": row["title"],
        "price": format_price(row["price"]),
        "image": {"fields": {"file": {"url": row["image_url"]}}},
        "info": row["info"],
    }


def group_by_category(rows: Iterable[Mapping[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """
    Agrupa las filas en un recorrido lineal.

    Devuelve un dict category_name → {"name", "brands"}, donde "brands" es a
    su vez un dict brand_name → {"name", "items"}. Los dict de Python
    conservan el orden de inserción, que aquí es el de primera aparición.
    """
    categories: Dict[str, Dict[str, Any]] = {}
    for row in rows:
        category_name = row["category_name"]
        brand_name = row["brand_name"]

        category = categories.get(category_name)
        if category is None:
            category = categories[category_name] = {"name": category_name, "brands": {}}

        brand = category["brands"].get(brand_name)
        if brand is None:
            brand = category["brands"][brand_name] = {"name": brand_name, "items": []}

        brand["items"].append(build_item(row))
    return categories


def build_catalog(
    rows: Iterable[Mapping[str, Any]],
    category_order: List[str] = CATEGORY_ORDER,
) -> Dict[str, List[Optional[Dict[str, Any]]]]:
    """Construye la respuesta {"categories": [...]} en el orden de category_order."""
    categories = group_by_category(rows)
    return {"categories": [categories.get(name) for name in category_order]}
