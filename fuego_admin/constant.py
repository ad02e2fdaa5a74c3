"""Editable static menu, category and status configuration."""

from __future__ import annotations

CATEGORY_LABELS: dict[str, str] = {
    "carnes": "Carnes Nobres",
    "massas": "Massas Artesanais",
    "entradas": "Entradas",
    "sobremesas": "Sobremesas",
    "vinhos": "Vinhos & Drinks",
}

DEFAULT_CATEGORY = "carnes"

DEFAULT_IMAGE_URL = "https://images.unsplash.com/photo-1546069901-ba9599a7e63c"

RESERVATION_STATUSES: tuple[str, ...] = ("pending", "confirmed", "cancelled")

FILTER_OPTIONS: tuple[str, ...] = ("all", *RESERVATION_STATUSES)

FILTER_LABELS: dict[str, str] = {
    "all": "Todas",
    "pending": "pending",
    "confirmed": "confirmed",
    "cancelled": "cancelled",
}

# Status values staff may set from the reservations list.
STATUS_TRANSITIONS: tuple[str, ...] = ("confirmed", "cancelled")

TAB_LABELS: dict[str, str] = {
    "overview": "Visão Geral",
    "reservations": "Reservas",
    "menu": "Cardápio",
    "settings": "Configurações",
}

# Seed set written by the "reset menu" action.
DEFAULT_MENU_ITEMS: list[dict[str, object]] = [
    {
        "id": "picanha-na-brasa",
        "name": "Picanha na Brasa",
        "description": "Picanha grelhada no fogo de chão, farofa e vinagrete.",
        "price": 129.90,
        "category": "carnes",
        "highlight": True,
        "image": "https://images.unsplash.com/photo-1558030006-450675393462",
    },
    {
        "id": "ancho-black-angus",
        "name": "Ancho Black Angus",
        "description": "Bife ancho maturado, manteiga de ervas e batatas rústicas.",
        "price": 148.00,
        "category": "carnes",
        "highlight": False,
        "image": "https://images.unsplash.com/photo-1600891964092-4316c288032e",
    },
    {
        "id": "fettuccine-funghi",
        "name": "Fettuccine ao Funghi",
        "description": "Massa fresca, creme de funghi secchi e parmesão.",
        "price": 79.90,
        "category": "massas",
        "highlight": False,
        "image": "https://images.unsplash.com/photo-1621996346565-e3dbc646d9a9",
    },
    {
        "id": "provoleta",
        "name": "Provoleta",
        "description": "Provolone na chapa com orégano e azeite.",
        "price": 42.00,
        "category": "entradas",
        "highlight": False,
        "image": "https://images.unsplash.com/photo-1541529086526-db283c563270",
    },
    {
        "id": "petit-gateau",
        "name": "Petit Gâteau",
        "description": "Bolo quente de chocolate com sorvete de baunilha.",
        "price": 36.00,
        "category": "sobremesas",
        "highlight": True,
        "image": "https://images.unsplash.com/photo-1624353365286-3f8d62daad51",
    },
    {
        "id": "malbec-reserva",
        "name": "Malbec Reserva",
        "description": "Taça de Malbec argentino, Mendoza.",
        "price": 38.00,
        "category": "vinhos",
        "highlight": False,
        "image": "https://images.unsplash.com/photo-1510812431401-41d2bd2722f3",
    },
]
