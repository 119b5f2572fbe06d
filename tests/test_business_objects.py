import pytest

from distributor.business_objects import ContainerSpec, Item, StateValidationError
from distributor.planning import Container, SelectionState


class TestItem:
    def test_negative_size_rejected(self):
        with pytest.raises(StateValidationError):
            Item(id="tom.dat", size=-1)

    def test_empty_id_rejected(self):
        with pytest.raises(StateValidationError):
            Item(id="", size=3)

    def test_orders_by_size_only(self):
        items = [Item("c", 30), Item("a", 10), Item("b", 10), Item("d", 0)]
        assert [it.id for it in sorted(items)] == ["d", "a", "b", "c"]

    def test_all_comparisons_by_size(self):
        small, big, same = Item("a", 1), Item("b", 5), Item("c", 1)
        assert small < big and small <= big
        assert big > small and big >= small
        assert small <= same and small >= same
        assert not small < same
        assert small != same

    def test_compare_with_other_type(self):
        with pytest.raises(TypeError):
            Item("a", 1) < 5
        with pytest.raises(TypeError):
            Item("a", 1) >= "b"


class TestContainer:
    def test_negative_capacity_rejected(self):
        with pytest.raises(StateValidationError):
            ContainerSpec(id="node1", capacity=-5)

    def test_try_insert_success_marks_touched(self):
        c = Container.from_spec(ContainerSpec("node1", 10))
        assert not c.touched
        assert c.try_insert(Item("a", 4))
        assert c.touched
        assert c.occupied == 4
        assert c.remaining == 6
        assert c.items == ["a"]

    def test_try_insert_failure_does_not_mutate(self):
        c = Container.from_spec(ContainerSpec("node1", 5))
        assert not c.try_insert(Item("a", 6))
        assert c.occupied == 0
        assert not c.touched
        assert c.items == []

    def test_exact_fit_allowed(self):
        c = Container("node1", 5)
        assert c.try_insert(Item("a", 2))
        assert c.try_insert(Item("b", 3))
        assert not c.try_insert(Item("c", 1))
        assert c.occupied == 5


class TestSelectionState:
    def test_duplicate_item_ids(self):
        with pytest.raises(StateValidationError):
            SelectionState(items=[Item("a", 1), Item("a", 2)], containers=[])

    def test_duplicate_container_ids(self):
        with pytest.raises(StateValidationError):
            SelectionState(items=[], containers=[ContainerSpec("n", 1), ContainerSpec("n", 2)])

    def test_to_runtime_builds_fresh_containers(self):
        state = SelectionState(items=[Item("a", 1)], containers=[ContainerSpec("n", 7)])
        rt = state.to_runtime()
        assert state.total_size == 1
        assert [c.id for c in rt.containers] == ["n"]
        assert rt.by_container_id()["n"].occupied == 0
