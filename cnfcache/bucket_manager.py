"""Encoding of a residual formula into the compact key used by the cache."""

from collections import Counter

from .cache_bucket import CacheBucket
from .literals import lit_sign, lit_var, mk_lit, negate
from .occurrence import ModeStore


def bytes_to_encode(value):
    """Number of bytes (1, 2 or 4) used to store integers up to ``value``."""
    if value < 0:
        raise ValueError(f"cannot size a negative value: {value}")
    if value < 1 << 8:
        return 1
    if value < 1 << 16:
        return 2
    return 4


def _encode(values, width):
    mask = (1 << (8 * width)) - 1
    return b"".join((value & mask).to_bytes(width, "little") for value in values)


class BucketManager:
    """Builds cache buckets for components of the formula of an occurrence manager.

    The residual formula of a component is the set of its clauses restricted
    to the unassigned variables of the component, with duplicates removed.
    ``mode`` selects which clauses take part, as in ``ModeStore``.
    """

    def __init__(self, occ_manager, strategy_cache=0, mode=ModeStore.NT):
        self.occ_manager = occ_manager
        self.strategy_cache = strategy_cache
        self.mode = ModeStore(mode)

    def _skip(self, idx):
        if self.mode == ModeStore.NT and not self.occ_manager.nb_unsat(idx):
            return True
        if self.mode == ModeStore.NB and len(self.occ_manager.clause(idx)) <= 2:
            return True
        return False

    def _refine_with(self, lit, distrib, intervals, bucket_of):
        """Extend the clauses containing ``lit`` and split their buckets."""
        own = None
        cut = list(range(len(intervals)))
        for idx in self.occ_manager.clause_indices(lit):
            if self._skip(idx):
                continue
            if idx not in bucket_of:
                if own is None:
                    own = len(intervals)
                    intervals.append([len(distrib), len(distrib)])
                    cut.append(own)
                bucket_of[idx] = own
                distrib.append([lit])
                intervals[own][1] += 1
                continue

            old = bucket_of[idx]
            if cut[old] == old:
                start = intervals[old][0]
                intervals.append([start, start])
                new = len(intervals) - 1
                cut.append(new)
                cut[old] = new
            else:
                new = cut[old]
            bucket_of[idx] = new
            intervals[old][0] += 1
            position = intervals[new][1]
            intervals[new][1] += 1
            distrib[position].append(lit)

    def collect_distrib(self, component):
        """Return the residual clauses of ``component`` without duplicates.

        Clauses keep the order in which the refinement places them; each
        clause lists its literals by variable of ``component``, positive first.
        """
        distrib = []
        intervals = []
        bucket_of = {}
        for var in component:
            if self.occ_manager.var_is_assigned(var):
                continue
            lit = mk_lit(var, False)
            self._refine_with(lit, distrib, intervals, bucket_of)
            self._refine_with(negate(lit), distrib, intervals, bucket_of)

        for start, end in intervals:
            for position in range(start + 1, end):
                distrib[position] = []
        return [clause for clause in distrib if clause]

    def store_formula(self, component):
        """Encode the residual formula of ``component`` into a new CacheBucket.

        The data holds the component variables, then ``(count, size)`` pairs
        for each clause size in increasing order, then the clauses sorted by
        size with literals renamed after their variable's rank in ``component``.
        """
        component = list(component)
        if not component:
            raise ValueError("cannot store the formula of an empty component")

        distrib = self.collect_distrib(component)
        sizes = Counter(len(clause) for clause in distrib)
        nb_lit = sum(len(clause) for clause in distrib)
        nb_clause = len(distrib)
        ordered_sizes = sorted(sizes)
        max_distrib = max((max(count, size) for size, count in sizes.items()), default=0)

        nb_o_var = bytes_to_encode(component[-1] + 1)
        nb_o_data = bytes_to_encode((len(component) + 2) << 1)
        nb_o_distrib = bytes_to_encode(max_distrib)

        parts = [_encode(component, nb_o_var)]
        if distrib:
            pairs = [value for size in ordered_sizes for value in (sizes[size], size)]
            parts.append(_encode(pairs, nb_o_distrib))

            rank = {var: position for position, var in enumerate(component)}
            encoded = [
                (rank[lit_var(lit)] << 1) | int(lit_sign(lit))
                for size in ordered_sizes
                for clause in distrib if len(clause) == size
                for lit in clause
            ]
            parts.append(_encode(encoded, nb_o_data))

        bucket = CacheBucket()
        bucket.set(b"".join(parts), len(component), nb_lit, nb_clause,
                   nb_o_data, nb_o_var, nb_o_distrib)
        return bucket