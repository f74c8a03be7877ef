"""Counts of satisfied and falsified literals per clause under assignments."""

from .literals import lit_sign, lit_var, negate


class FormulaManager:
    """Keeps, for every clause, how many of its literals are true and false."""

    def __init__(self, clauses, nb_var):
        self.nb_var = nb_var
        self.clauses = [list(clause) for clause in clauses]
        self._occurrence = [[] for _ in range(2 * nb_var)]
        self._nb_sat = [0] * len(self.clauses)
        self._nb_unsat = [0] * len(self.clauses)

        for idx, clause in enumerate(self.clauses):
            for lit in clause:
                if not 0 <= lit < len(self._occurrence):
                    raise ValueError(
                        f"literal {lit} of clause {idx} is outside {nb_var} variables")
                self._occurrence[lit].append(idx)

    def assign_value(self, lits):
        """Account for the literals in ``lits`` becoming true."""
        for lit in lits:
            for idx in self._occurrence[lit]:
                self._nb_sat[idx] += 1
            for idx in self._occurrence[negate(lit)]:
                self._nb_unsat[idx] += 1

    def unassign_value(self, lits):
        """Undo an earlier ``assign_value`` of the same literals."""
        for lit in lits:
            for idx in self._occurrence[lit]:
                self._nb_sat[idx] -= 1
            for idx in self._occurrence[negate(lit)]:
                self._nb_unsat[idx] -= 1

    def check(self, current_value):
        """Verify the counters against an assignment.

        ``current_value[var]`` is True, False or None (unassigned). Raises
        ValueError on the first clause whose counters disagree.
        """
        for idx, clause in enumerate(self.clauses):
            sat = unsat = 0
            for lit in clause:
                value = current_value[lit_var(lit)]
                if value is None:
                    continue
                if value != lit_sign(lit):
                    sat += 1
                else:
                    unsat += 1
            if sat != self._nb_sat[idx] or unsat != self._nb_unsat[idx]:
                raise ValueError(
                    f"clause {idx}: expected {sat} satisfied and {unsat} falsified "
                    f"literals, counted {self._nb_sat[idx]} and {self._nb_unsat[idx]}")

    def nb_lit_sat_in_clause(self, idx):
        return self._nb_sat[idx]

    def nb_lit_unsat_in_clause(self, idx):
        return self._nb_unsat[idx]