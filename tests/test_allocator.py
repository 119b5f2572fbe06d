import csv

import pytest

from distributor import Allocator, Policy
from distributor.business_objects import ConfigurationError, ContainerSpec, Item, StateValidationError
from distributor.planning import SelectionState
from distributor.planning.tracker import Tracker
from distributor.quality_metrics.balance import compute_global_metrics, per_container_metrics


def scenario_a(allocator):
    for name, size in [("a", 10), ("b", 20), ("c", 30)]:
        allocator.add_item(name, size)
    for name, cap in [("X", 25), ("Y", 35)]:
        allocator.add_container(name, cap)
    return allocator


class TestAllocator:
    def test_allocate_returns_mapping(self):
        alloc = scenario_a(Allocator())
        assert alloc.total_size == 60
        assert alloc.num_containers == 2
        assert alloc.allocate() == {"a": "Y", "c": None, "b": "Y"}
        assert {c.id: c.occupied for c in alloc.containers} == {"X": 0, "Y": 30}

    def test_allocate_consumes_items(self):
        alloc = scenario_a(Allocator())
        alloc.allocate()
        first = alloc.solution
        assert len(alloc) == 0
        assert alloc.allocate() == {}
        assert alloc.solution is first
        assert alloc.solution.assignments == {"a": "Y", "c": None, "b": "Y"}
        assert {c.id: c.occupied for c in alloc.containers} == {"X": 0, "Y": 30}

    def test_no_containers_is_an_error(self):
        alloc = Allocator()
        alloc.add_item("tom.dat", 1024)
        with pytest.raises(ConfigurationError, match="no containers"):
            alloc.allocate()
        assert alloc.solution is None
        assert len(alloc) == 1

    def test_no_items(self):
        alloc = Allocator()
        assert alloc.allocate() == {}
        alloc.add_container("node1", 10)
        assert alloc.allocate() == {}

    def test_duplicate_ids(self):
        alloc = Allocator()
        alloc.add_item("tom.dat", 1)
        alloc.add_item("tom.dat", 2)
        alloc.add_container("node1", 10)
        with pytest.raises(StateValidationError):
            alloc.allocate()

    def test_negative_size(self):
        with pytest.raises(StateValidationError):
            Allocator().add_item("tom.dat", -1)

    def test_policy_label_validation(self):
        with pytest.raises(ConfigurationError):
            Policy(unassigned_label="not placed")
        with pytest.raises(ConfigurationError):
            Policy(unassigned_label="")


class TestTracker:
    def test_artifacts(self, tmp_path):
        out = tmp_path / "reports"
        alloc = scenario_a(Allocator(tracker=Tracker(out_dir=str(out))))
        alloc.allocate()

        with open(out / "attempt_log.csv", newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert [r["item_id"] for r in rows] == ["a", "c", "b"]
        assert [r["placed"] for r in rows] == ["1", "0", "1"]
        assert [r["occupied_after"] for r in rows] == ["10", "10", "30"]
        assert rows[2]["phase"] == "retrying_smallest"

        with open(out / "assignments.csv", newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert [(r["item_id"], r["container_id"]) for r in rows] == [("a", "Y"), ("c", ""), ("b", "Y")]

        with open(out / "per_container.csv", newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert [(r["container_id"], r["occupied"], r["items_placed"]) for r in rows] == [
            ("X", "0", "0"),
            ("Y", "30", "2"),
        ]
        assert (out / "summary.csv").exists()

    def test_second_allocate_keeps_artifacts(self, tmp_path):
        out = tmp_path / "reports"
        alloc = scenario_a(Allocator(tracker=Tracker(out_dir=str(out))))
        alloc.allocate()
        alloc.allocate()

        with open(out / "assignments.csv", newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert [r["item_id"] for r in rows] == ["a", "c", "b"]

        with open(out / "per_container.csv", newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert rows[1]["occupied"] == "30"


class TestBalanceMetrics:
    def test_metrics(self):
        alloc = scenario_a(Allocator())
        alloc.allocate()

        state = SelectionState(
            items=[Item("a", 10), Item("b", 20), Item("c", 30)],
            containers=[ContainerSpec("X", 25), ContainerSpec("Y", 35)],
        )
        rows = per_container_metrics(state, alloc.solution)
        assert rows[1]["remaining"] == 5
        assert rows[0]["utilization_pct"] == 0.0

        m = compute_global_metrics(state, alloc.solution)
        assert m["assigned_items"] == 2.0
        assert m["unassigned_items"] == 1.0
        assert m["unassigned_size"] == 30.0
        assert m["capacity_sum"] == 60.0
        assert m["utilization_pct"] == 50.0
        assert m["load_spread"] == 30.0
        assert m["load_std"] == 15.0
        assert m["mean"] == 30.0
