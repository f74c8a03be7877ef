"""CNF literals, occurrence tracking, component splitting, component encoding and hitting sets."""

__version__ = "0.1.0"

__all__ = [
    "bucket_manager",
    "cache_bucket",
    "dynamic_occurrence",
    "formula_manager",
    "greedy_occurrence",
    "hitting_set",
    "literals",
    "occurrence",
    "options",
]