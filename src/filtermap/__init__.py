"""filtermap - generic filter and map operations over finite sequences."""

__version__ = "0.1.0"

from filtermap.application.pipeline import Pipeline
from filtermap.domain.operations import filter_items, map_items

__all__ = ["Pipeline", "__version__", "filter_items", "map_items"]
