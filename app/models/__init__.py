# Importa todos los modelos para que queden registrados en Base.metadata
from .base import Base
from .enums import EggQuality, ExpenseType
from .raw_material import RawMaterial
from .finished_feed import FinishedFeed
from .feed_composition import FeedComposition
from .chicken_flock import ChickenFlock
from .feed_consumption import FeedConsumption
from .egg_production import EggProduction
from .egg_sale import EggSale
from .other_expense import OtherExpense

__all__ = [
    "Base",
    "EggQuality",
    "ExpenseType",
    "RawMaterial",
    "FinishedFeed",
    "FeedComposition",
    "ChickenFlock",
    "FeedConsumption",
    "EggProduction",
    "EggSale",
    "OtherExpense",
]
