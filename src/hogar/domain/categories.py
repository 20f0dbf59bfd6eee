"""Keyword-based grocery categories.

A name belongs to the first category, in declaration order, that has a
keyword contained in the lower-cased name. Names matching nothing fall back
to ``Otros``. Keywords are substrings, so short words that appear inside
unrelated names (``res`` in ``cereales``, ``te`` in ``detergente``) are left
out on purpose.
"""
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

FALLBACK_CATEGORY = "Otros"

CATEGORY_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Frutas y Verduras": (
        "manzana", "banano", "banana", "platano", "plátano", "naranja",
        "mandarina", "limon", "limón", "fresa", "uva", "pera", "mango",
        "piña", "papaya", "aguacate", "tomate", "cebolla", "papa",
        "zanahoria", "lechuga", "espinaca", "brocoli", "brócoli", "pepino",
        "ajo", "pimenton", "pimentón", "mora", "sandia", "sandía", "melon",
        "melón", "fruta", "verdura", "cilantro", "yuca",
    ),
    "Carnes y Pescados": (
        "pollo", "carne", "cerdo", "pescado", "atun", "atún", "salmon",
        "salmón", "tilapia", "jamon", "jamón", "salchicha", "chorizo",
        "tocino", "camaron", "camarón", "pechuga", "costilla", "molida",
        "lomo",
    ),
    "Lácteos y Huevos": (
        "leche", "queso", "yogur", "kumis", "mantequilla",
        "huevo", "arequipe", "cuajada",
    ),
    "Panadería y Cereales": (
        "pan", "arepa", "cereal", "avena", "galleta", "tostada", "harina",
        "ponqué", "ponque", "granola",
    ),
    "Despensa": (
        "arroz", "pasta", "espagueti", "frijol", "lenteja", "garbanzo",
        "aceite", "azucar", "azúcar", "cafe", "café", "chocolate",
        "salsa", "mayonesa", "enlatado", "especia", "vinagre", "miel",
    ),
    "Bebidas": (
        "agua", "jugo", "gaseosa", "cerveza", "vino", "refresco", "soda",
        "bebida",
    ),
    "Congelados": (
        "helado", "congelado", "hielo",
    ),
    "Limpieza": (
        "detergente", "jabon de loza", "jabón de loza", "lavaloza", "cloro",
        "blanqueador", "suavizante", "limpiador", "desinfectante", "esponja",
        "escoba", "trapero", "bolsas de basura",
    ),
    "Cuidado Personal": (
        "shampoo", "champu", "champú", "jabon", "jabón", "crema dental",
        "cepillo", "desodorante", "papel higienico", "papel higiénico",
        "toalla", "afeitar",
    ),
    "Mascotas": (
        "perro", "gato", "concentrado", "arena para",
    ),
})

# Every label, in priority order, ending with the fallback
CATEGORIES: Tuple[str, ...] = (*CATEGORY_KEYWORDS, FALLBACK_CATEGORY)


def categorize(name: Optional[str]) -> str:
    """
    Return the category label for an item name.

    Args:
        name: Item name, in any case

    Returns:
        The first category with a keyword inside the name, or ``Otros``
    """
    lowered = (name or "").lower()
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            return category
    return FALLBACK_CATEGORY


def is_known_category(label: str) -> bool:
    return label in CATEGORIES
