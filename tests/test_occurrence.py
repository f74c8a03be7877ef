import pytest

from cnfcache.literals import mk_lit
from cnfcache.occurrence import CnfOccurrenceManager, ComponentSplit, ModeStore


def P(v):
    return mk_lit(v, False)


def N(v):
    return mk_lit(v, True)


def indexed(clauses, nb_var):
    manager = CnfOccurrenceManager(clauses, nb_var)
    for idx, clause in enumerate(manager.clauses):
        for lit in clause:
            manager.occurrences[lit].append(idx)
    return manager


def test_init_stores_clauses_and_max_size():
    clauses = [[P(0), N(1)], [P(1), P(2), N(3)]]
    manager = CnfOccurrenceManager(clauses, 4)
    assert manager.clauses == clauses
    assert manager.nb_clause == 2
    assert manager.max_size_clause == 3
    assert manager.sum_size_clauses() == 5


def test_empty_clause_is_rejected():
    with pytest.raises(ValueError):
        CnfOccurrenceManager([[P(0)], []], 2)


def test_literal_out_of_range_is_rejected():
    with pytest.raises(ValueError):
        CnfOccurrenceManager([[P(5)]], 2)


def test_empty_constructor_sizes_counters():
    manager = CnfOccurrenceManager.empty(3, 4, 7)
    assert manager.max_size_clause == 7
    assert [manager.nb_unsat(i) for i in range(3)] == [0, 0, 0]
    assert manager.nb_clause == 0
    assert manager.nb_var == 4


def test_connected_components():
    manager = indexed([[P(0), N(1)], [P(2), P(3)], [N(4)]], 5)
    split = manager.compute_connected_component([0, 1, 2, 3, 4])
    assert split == ComponentSplit([[0, 1], [2, 3]], [4], [0, 1, 2, 3])
    assert split.nb_component == 2


def test_components_merge_through_shared_variable():
    manager = indexed([[P(0), N(1)], [P(1), P(2)]], 3)
    split = manager.compute_connected_component([2, 0, 1])
    assert split.components == [[2, 0, 1]]
    assert split.free_vars == []


def test_assigned_variable_disconnects():
    manager = indexed([[P(0), P(1)], [N(1), P(2)]], 3)
    manager.values[1] = True
    split = manager.compute_connected_component([0, 1, 2])
    assert split.components == []
    assert split.free_vars == [0, 2]
    assert split.not_free_vars == []


def test_components_partition_the_unassigned_variables():
    manager = indexed([[P(0), P(3)], [P(1), N(4)], [P(4), P(5)], [N(2)]], 6)
    variables = list(range(6))
    split = manager.compute_connected_component(variables)
    covered = sorted(split.free_vars + split.not_free_vars)
    assert covered == variables
    assert sorted(v for comp in split.components for v in comp) == sorted(split.not_free_vars)


def test_repeated_calls_give_same_result():
    manager = indexed([[P(0), P(1)], [P(2), P(3)]], 4)
    first = manager.compute_connected_component([0, 1, 2, 3])
    second = manager.compute_connected_component([0, 1, 2, 3])
    assert first == second


def test_clause_is_satisfied_follows_values():
    manager = CnfOccurrenceManager([[P(0), N(1)]], 2)
    clause = manager.clause(0)
    assert not manager.clause_is_satisfied(clause)
    manager.values[1] = True
    assert not manager.clause_is_satisfied(clause)
    manager.values[1] = False
    assert manager.clause_is_satisfied(clause)
    assert not manager.is_satisfied_clause(0)


def test_literal_assignment_queries():
    manager = CnfOccurrenceManager([[P(0)]], 2)
    manager.values[0] = False
    assert manager.lit_is_assigned(P(0))
    assert manager.var_is_assigned(0)
    assert not manager.lit_is_assigned_to_true(P(0))
    assert manager.lit_is_assigned_to_true(N(0))
    assert not manager.lit_is_assigned(N(1))
    assert not manager.lit_is_assigned_to_true(P(1))


def test_update_and_pop_current_clause_set():
    manager = CnfOccurrenceManager([[P(0), P(1)], [P(2), P(3)], [N(1), P(2)]], 4)
    manager.update_current_clause_set([0, 1])
    assert manager.current_clauses({0, 1}) == [0, 2]
    manager.pop_previous_clause_set()
    assert manager.current_clauses({0, 1, 2, 3}) == [0, 1, 2]


def test_current_clauses_checks_component():
    manager = CnfOccurrenceManager([[P(0)], [P(1)]], 2)
    with pytest.raises(ValueError):
        manager.current_clauses({0})


def test_pop_without_saved_set_raises():
    manager = CnfOccurrenceManager([[P(0)]], 1)
    with pytest.raises(IndexError):
        manager.pop_previous_clause_set()


def test_not_satisfied_in_component_uses_watcher():
    manager = CnfOccurrenceManager([[P(2), P(0)]], 3)
    assert manager.is_not_satisfied_clause_in_component(0, {2})
    assert not manager.is_not_satisfied_clause_in_component(0, {0})


def test_clause_counts_per_literal():
    manager = indexed([[P(0), P(1)], [P(0), P(1), P(2)], [N(0), P(2)]], 3)
    assert manager.nb_clause_lit(P(0)) == 2
    assert manager.nb_clause_var(0) == 3
    assert manager.clause_indices(P(0)) == [0, 1]
    assert manager.nb_binary_clause(P(0)) == 1
    assert manager.nb_not_binary_clause(P(0)) == 1
    assert manager.nb_binary_clause_var(0) == 2


def test_by_pass_modes():
    manager = CnfOccurrenceManager([[P(0), P(1)], [P(0), P(1), P(2)]], 3)
    assert manager.by_pass(ModeStore.NB, 0)
    assert not manager.by_pass(ModeStore.NB, 1)
    assert manager.by_pass(ModeStore.NT, 1)
    assert not manager.by_pass(ModeStore.ALL, 0)


def test_init_formula_resets_assignment():
    manager = CnfOccurrenceManager([[P(0)]], 2)
    manager.values[0] = True
    manager.init_formula([[P(1), N(0)]])
    assert manager.values == [None, None]
    assert manager.clauses == [[P(1), N(0)]]
    assert manager.current_clauses({1}) == [0]