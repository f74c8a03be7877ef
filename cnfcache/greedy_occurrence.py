"""Occurrence manager whose lists are rebuilt from scratch for an assignment."""

from .literals import lit_sign, lit_var, mk_lit
from .occurrence import CnfOccurrenceManager


class GreedyOccurrenceManager(CnfOccurrenceManager):
    """Rebuilds occurrence lists and falsified counts on each ``initialize``."""

    def __init__(self, clauses, nb_var):
        super().__init__(clauses, nb_var)
        self._init_occurrences = [[] for _ in range(2 * nb_var)]
        for idx, clause in enumerate(self.clauses):
            for lit in clause:
                self._init_occurrences[lit].append(idx)

    def _initialize_from_literal(self, lit, visited):
        for idx in self._init_occurrences[lit]:
            if idx in visited:
                continue
            visited.add(idx)

            clause = self.clauses[idx]
            unsat = 0
            satisfied = False
            for other in clause:
                value = self.values[lit_var(other)]
                if value is None:
                    continue
                if value != lit_sign(other):
                    satisfied = True
                    break
                unsat += 1
            self._nb_unsat[idx] = unsat

            if satisfied:
                continue
            for other in clause:
                if self.values[lit_var(other)] is None:
                    self.occurrences[other].append(idx)

    def initialize(self, set_of_var, units):
        """Assign ``units`` and rebuild the occurrence lists of ``set_of_var``."""
        self.values = [None] * self.nb_var
        for lit in units:
            self.values[lit_var(lit)] = not lit_sign(lit)

        for var in set_of_var:
            self.occurrences[mk_lit(var, False)].clear()
            self.occurrences[mk_lit(var, True)].clear()

        visited = set()
        for var in set_of_var:
            self._initialize_from_literal(mk_lit(var, False), visited)
            self._initialize_from_literal(mk_lit(var, True), visited)