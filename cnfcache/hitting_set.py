"""Greedy computation of a small hitting set of a set of clauses."""

from collections import defaultdict

from .literals import lit_var


def hitting_set(clauses, score):
    """Return literals such that every clause contains at least one of them.

    ``score`` maps a variable to a number. Each clause first contributes its
    best-scored literal; literals are then ordered by decreasing score and
    dropped, from the lowest scored, when every clause they hit is hit by
    another kept literal.
    """
    clauses = [list(clause) for clause in clauses]
    occurrences = defaultdict(list)
    for idx, clause in enumerate(clauses):
        if not clause:
            raise ValueError(f"clause {idx} is empty and cannot be hit")
        for lit in clause:
            occurrences[lit].append(idx)

    selected = set()
    chosen = []
    for clause in clauses:
        best = clause[0]
        best_score = score(lit_var(best))
        for lit in clause[1:]:
            current = score(lit_var(lit))
            if current > best_score:
                best, best_score = lit, current
        if best not in selected:
            chosen.append(best)
            selected.add(best)

    chosen.sort(key=lambda lit: score(lit_var(lit)), reverse=True)

    nb_selected = [sum(1 for lit in clause if lit in selected) for clause in clauses]

    for i in range(len(chosen) - 1, -1, -1):
        lit = chosen[i]
        hit = occurrences[lit]
        if any(nb_selected[idx] == 1 for idx in hit):
            continue
        chosen[i] = chosen[-1]
        chosen.pop()
        selected.discard(lit)
        for idx in hit:
            nb_selected[idx] -= 1

    return chosen