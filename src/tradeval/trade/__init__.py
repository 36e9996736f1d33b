"""Selection lookup, group aggregation and trade verdicts."""

from .aggregate import AggregateCache, GroupAggregate, aggregate_group, resolve_selection
from .index import LookupIndex, normalize_name
from .verdict import TradeEvaluation, TradeVerdict, compare_groups, pick_winner

__all__ = [
    "AggregateCache",
    "GroupAggregate",
    "LookupIndex",
    "TradeEvaluation",
    "TradeVerdict",
    "aggregate_group",
    "compare_groups",
    "normalize_name",
    "pick_winner",
    "resolve_selection",
]
