"""Occurrence manager that follows assignments incrementally."""

from .literals import lit_sign, lit_var, negate
from .occurrence import CnfOccurrenceManager


def _remove_index(indices, idx):
    """Remove ``idx`` from ``indices`` by moving the last element into its slot."""
    try:
        pos = indices.index(idx)
    except ValueError:
        raise ValueError(f"clause {idx} is not in the occurrence list") from None
    indices[pos] = indices[-1]
    indices.pop()


class DynamicOccurrenceManager(CnfOccurrenceManager):
    """Keeps occurrence lists, counters and watchers in step with assignments.

    Literals assigned by ``pre_update`` must be released by ``post_update``
    with the same list, in the reverse order of the calls.
    """

    def __init__(self, clauses, nb_var):
        super().__init__(clauses, nb_var)
        self._build_occurrences()

    def _build_occurrences(self):
        for indices in self.occurrences:
            indices.clear()
        for idx, clause in enumerate(self.clauses):
            for lit in clause:
                self.occurrences[lit].append(idx)

    def init_formula(self, clauses):
        """Replace the formula, forget the assignment and rebuild the lists."""
        super().init_formula(clauses)
        self._build_occurrences()

    def pre_update(self, lits):
        """Assign the literals of ``lits`` to true and update the structures."""
        review = []
        for lit in lits:
            self.values[lit_var(lit)] = not lit_sign(lit)

            for idx in self.occurrences[lit]:
                self._nb_sat[idx] += 1
                for other in self.clauses[idx]:
                    if self.values[lit_var(other)] is None:
                        _remove_index(self.occurrences[other], idx)

            falsified = negate(lit)
            for idx in self.occurrences[falsified]:
                self._nb_unsat[idx] += 1
                if self._watcher[idx] == falsified:
                    review.append(idx)

        for idx in review:
            if self._nb_sat[idx]:
                continue
            for other in self.clauses[idx]:
                if self.values[lit_var(other)] is None:
                    self._watcher[idx] = other
                    break

        self._stack_size.append(self._current_size)
        i = 0
        while i < self._current_size:
            if not self._nb_sat[self._current_idx[i]]:
                i += 1
            else:
                self._current_size -= 1
                last = self._current_size
                self._current_idx[i], self._current_idx[last] = (
                    self._current_idx[last], self._current_idx[i])

    def post_update(self, lits):
        """Undo the ``pre_update`` made with the same literals."""
        for lit in reversed(lits):
            for idx in self.occurrences[lit]:
                self._nb_sat[idx] -= 1
                for other in self.clauses[idx]:
                    if self.values[lit_var(other)] is None:
                        self.occurrences[other].append(idx)

            for idx in self.occurrences[negate(lit)]:
                self._nb_unsat[idx] -= 1
            self.values[lit_var(lit)] = None

        self.pop_previous_clause_set()