"""Part definitions package."""
from . import category
from . import catalog
from .category import Body, Category, Engine, Exhaust, Tip, Transition
from .catalog import DEFAULT_CATALOG, PARTS_BIN, Part, PartCatalog

__all__ = [
    'category',
    'catalog',
    'Body',
    'Category',
    'Engine',
    'Exhaust',
    'Tip',
    'Transition',
    'DEFAULT_CATALOG',
    'PARTS_BIN',
    'Part',
    'PartCatalog'
]
