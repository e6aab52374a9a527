# models/__init__.py
from utils.db import Base  # re-export
from .batch import Breed, Batch
from .weight_sample import WeightSample
from .growth_standard import GrowthStandard
from .feed import FeedRecord, Expense
