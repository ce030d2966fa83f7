#!/usr/bin/env python3
"""
🧪 PRUEBA DE HUMO - API BEAUTY SHOP

Recorre una instancia en marcha de la API: crea una categoría, una marca y un
producto, lee el catálogo y el producto, y borra lo creado.

Uso:
    python scripts/smoke_catalog.py [URL_BASE]   # por defecto http://localhost:3000
"""

import json
import sys

import requests

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:3000"


def call(method, path, payload=None):
    """Función auxiliar: ejecuta la petición e imprime el resultado."""
    url = f"{BASE_URL}{path}"
    try:
        response = requests.request(method, url, json=payload, timeout=10)
    except requests.RequestException as e:
        print(f"❌ {method} {path}: {e}")
        sys.exit(1)

    icon = "✅" if response.status_code < 400 else "❌"
    print(f"{icon} {method} {path} → {response.status_code}")
    try:
        body = response.json()
    except ValueError:
        body = response.text
    return response.status_code, body


def main():
    print(f"🔍 Probando {BASE_URL}")
    print("=" * 60)

    _, category = call("POST", "/categories", {"name": "Make-Up Products"})
    category_id = category["id"]

    status, _ = call("POST", "/brands", {"name": "Smoke Test Brand"})
    assert status == 400, "la marca sin category_id debería rechazarse"

    _, brand = call("POST", "/brands", {"name": "Smoke Test Brand", "category_id": category_id})
    brand_id = brand["id"]

    _, product = call("POST", "/products", {
        "title": "Smoke Test Lipstick",
        "price": 9.5,
        "image_url": "https://example.com/lipstick.jpg",
        "brand_id": brand_id,
        "info": "Creado por smoke_catalog.py",
    })
    product_id = product["id"]

    _, stored = call("GET", f"/products/{product_id}")
    print(json.dumps(stored, indent=2, ensure_ascii=False))

    _, catalog = call("GET", "/products")
    makeup = catalog["categories"][2]
    print(f"\n📋 Make-Up Products: {json.dumps(makeup, indent=2, ensure_ascii=False)}")

    print("\n🗑️ Limpieza")
    call("DELETE", f"/products/{product_id}")
    call("DELETE", f"/brands/{brand_id}")
    call("DELETE", f"/categories/{category_id}")

    status, _ = call("GET", f"/products/{product_id}")
    assert status == 404, "el producto debería haberse borrado"
    print("\n✅ Prueba de humo completada")


if __name__ == "__main__":
    main()
