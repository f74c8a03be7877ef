"""Settings of a compilation run."""

from dataclasses import dataclass


@dataclass
class Options:
    """Options chosen for caching, heuristics and decomposition."""

    opt_cache: int
    decomposable_and_node: bool
    reverse_polarity: bool
    reduce_primal_graph: bool
    equiv_simplification: bool
    cache_store: str
    var_heuristic: str
    phase_heuristic: str
    partition_heuristic: str
    cache_representation: str
    reduce_cache: int
    strategy_red_cache: int
    freq_limit_dyn: int

    def describe(self):
        """The option summary in the solver's comment-line format."""
        polarity = "reverse " if self.reverse_polarity else ""
        reduction = " + graph reduction" if self.reduce_primal_graph else ""
        equivalence = " + equivalence simplication" if self.equiv_simplification else ""
        lines = [
            "c",
            "c \033[1m\033[32mOption list \033[0m",
            f"c Caching: {int(self.opt_cache)}",
            f"c Reduce cache procedure level: {int(self.reduce_cache)}",
            f"c Strategy for Reducing the cache: {int(self.strategy_red_cache)}",
            f"c Cache representation: {self.cache_representation}",
            f"c Part of the formula that is cached: {self.cache_store}",
            f"c Variable heuristic: {self.var_heuristic}",
            f"c Phase heuristic: {polarity}{self.phase_heuristic}",
            f"c Partitioning heuristic: {self.partition_heuristic}{reduction}{equivalence}",
            "c",
        ]
        return "\n".join(lines) + "\n"