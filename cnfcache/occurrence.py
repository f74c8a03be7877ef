"""Occurrence lists over a CNF formula and connected-component detection."""

from dataclasses import dataclass, field
from enum import IntEnum

from .literals import lit_sign, lit_var, mk_lit, negate


class ModeStore(IntEnum):
    """Which part of a residual formula is considered when caching it."""

    ALL = 0
    NT = 1
    NB = 2


@dataclass
class ComponentSplit:
    """Result of splitting a set of variables into connected components.

    ``components`` holds the variables of each component in input order,
    ``free_vars`` the unassigned variables that occur in no remaining clause
    together with another variable, and ``not_free_vars`` the variables that
    belong to some component.
    """

    components: list = field(default_factory=list)
    free_vars: list = field(default_factory=list)
    not_free_vars: list = field(default_factory=list)

    @property
    def nb_component(self):
        return len(self.components)


class CnfOccurrenceManager:
    """Clauses of a formula, the current assignment and occurrence lists.

    ``values[var]`` is True, False or None (unassigned). ``occurrences[lit]``
    lists the indices of the clauses in which ``lit`` is still relevant; the
    subclasses keep it up to date with the assignment.
    """

    def __init__(self, clauses, nb_var):
        self.nb_var = nb_var
        self.values = [None] * nb_var
        self.occurrences = [[] for _ in range(2 * nb_var)]
        self.clauses = []
        self.max_size_clause = 0
        self._nb_sat = []
        self._nb_unsat = []
        self._watcher = []
        self._current_idx = []
        self._current_size = 0
        self._stack_size = []
        CnfOccurrenceManager.init_formula(self, clauses)

    @classmethod
    def empty(cls, nb_clause, nb_var, max_size_clause):
        """A manager without clauses whose counters are sized for ``nb_clause``."""
        manager = cls([], nb_var)
        manager.max_size_clause = max_size_clause
        manager._nb_sat = [0] * nb_clause
        manager._nb_unsat = [0] * nb_clause
        manager._watcher = [None] * nb_clause
        return manager

    def init_formula(self, clauses):
        """Replace the formula and forget the current assignment."""
        copied = []
        for idx, clause in enumerate(clauses):
            clause = list(clause)
            if not clause:
                raise ValueError(f"clause {idx} is empty")
            for lit in clause:
                if not 0 <= lit < 2 * self.nb_var:
                    raise ValueError(
                        f"literal {lit} of clause {idx} is outside {self.nb_var} variables")
            copied.append(clause)

        self.clauses = copied
        self._current_idx = list(range(len(copied)))
        self._current_size = len(copied)
        self._stack_size = []
        self.values = [None] * self.nb_var
        self._nb_sat = [0] * len(copied)
        self._nb_unsat = [0] * len(copied)
        self._watcher = [clause[0] for clause in copied]
        longest = max((len(clause) for clause in copied), default=0)
        self.max_size_clause = max(self.max_size_clause, longest)

    @property
    def nb_clause(self):
        return len(self.clauses)

    def _connect(self, lit, index, members, number, seen):
        for idx in self.occurrences[lit]:
            if idx in seen:
                continue
            seen.add(idx)
            for other in self.clauses[idx]:
                var = lit_var(other)
                if self.values[var] is not None:
                    continue
                if not index.get(var):
                    members.append(var)
                    index[var] = number

    def compute_connected_component(self, set_of_var):
        """Split the unassigned variables of ``set_of_var`` into components."""
        index = {}
        seen = set()
        count = 0

        for var in set_of_var:
            if self.values[var] is not None or index.get(var):
                continue
            count += 1
            index[var] = count
            members = [var]
            pos = 0
            while pos < len(members):
                lit = mk_lit(members[pos])
                self._connect(lit, index, members, count, seen)
                self._connect(negate(lit), index, members, count, seen)
                pos += 1
            if len(members) <= 1:
                index[var] = 0
                count -= 1

        split = ComponentSplit(components=[[] for _ in range(count)])
        for var in set_of_var:
            number = index.get(var, 0)
            if number:
                split.components[number - 1].append(var)
                split.not_free_vars.append(var)
            elif self.values[var] is None:
                split.free_vars.append(var)
            index.pop(var, None)
        return split

    def is_satisfied_clause(self, idx):
        """True when clause ``idx`` holds a satisfied literal, by the counters."""
        return bool(self._nb_sat[idx])

    def clause_is_satisfied(self, clause):
        """True when some literal of ``clause`` is true under ``values``."""
        return any(self.lit_is_assigned_to_true(lit) for lit in clause)

    def is_not_satisfied_clause_in_component(self, idx, in_component):
        """True when clause ``idx`` is unsatisfied and watched inside ``in_component``.

        ``in_component`` is a collection of variables.
        """
        if self._nb_sat[idx]:
            return False
        watcher = self._watcher[idx]
        if watcher is None:
            return False
        return lit_var(watcher) in in_component

    def current_clauses(self, in_component):
        """Sorted indices of the clauses in the current clause set."""
        indices = sorted(self._current_idx[:self._current_size])
        for idx in indices:
            if not self.is_not_satisfied_clause_in_component(idx, in_component):
                raise ValueError(
                    f"clause {idx} is satisfied or outside the given component")
        return indices

    def update_current_clause_set(self, component):
        """Narrow the current clause set to the unsatisfied clauses of ``component``."""
        in_component = set(component)
        self._stack_size.append(self._current_size)
        i = 0
        while i < self._current_size:
            if self.is_not_satisfied_clause_in_component(self._current_idx[i], in_component):
                i += 1
            else:
                self._current_size -= 1
                last = self._current_size
                self._current_idx[i], self._current_idx[last] = (
                    self._current_idx[last], self._current_idx[i])

    def pop_previous_clause_set(self):
        """Restore the clause set saved by the last narrowing."""
        if not self._stack_size:
            raise IndexError("no previous clause set to restore")
        self._current_size = self._stack_size.pop()

    def nb_binary_clause(self, lit):
        """Number of clauses of ``lit`` with exactly two non-falsified literals."""
        return sum(1 for idx in self.occurrences[lit]
                   if len(self.clauses[idx]) - self._nb_unsat[idx] == 2)

    def nb_binary_clause_var(self, var):
        return (self.nb_binary_clause(mk_lit(var, False))
                + self.nb_binary_clause(mk_lit(var, True)))

    def nb_not_binary_clause(self, lit):
        return self.nb_clause_lit(lit) - self.nb_binary_clause(lit)

    def nb_clause_lit(self, lit):
        return len(self.occurrences[lit])

    def nb_clause_var(self, var):
        return self.nb_clause_lit(mk_lit(var, False)) + self.nb_clause_lit(mk_lit(var, True))

    def clause_indices(self, lit):
        return self.occurrences[lit]

    def clause(self, idx):
        return self.clauses[idx]

    def nb_unsat(self, idx):
        return self._nb_unsat[idx]

    def lit_is_assigned(self, lit):
        return self.values[lit_var(lit)] is not None

    def lit_is_assigned_to_true(self, lit):
        value = self.values[lit_var(lit)]
        return value is not None and value != lit_sign(lit)

    def var_is_assigned(self, var):
        return self.values[var] is not None

    def sum_size_clauses(self):
        return sum(len(clause) for clause in self.clauses)

    def by_pass(self, mode, idx):
        """True when clause ``idx`` is left out of a cache key under ``mode``."""
        if mode >= ModeStore.NB and len(self.clauses[idx]) <= 2:
            return True
        if mode == ModeStore.NT and not self._nb_unsat[idx]:
            return True
        return False