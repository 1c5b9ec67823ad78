import pytest

from domain.entities import DEFAULT_CATEGORY, Priority, Task
from infrastructure.store import TaskStore, seed_tasks


def test_add_prepends_with_defaults(store):
    before = store.all()
    task = store.add("Water the plants")
    assert task is not None
    assert store.all()[0] is task
    assert store.all()[1:] == before
    assert task.text == "Water the plants"
    assert task.completed is False
    assert task.priority is Priority.MEDIUM
    assert task.category == DEFAULT_CATEGORY
    assert task.created_at is not None


@pytest.mark.parametrize("text", ["", "  ", "\t\n"])
def test_add_rejects_blank_text(store, text):
    before = store.all()
    assert store.add(text) is None
    assert store.all() is before
    assert len(store) == 3


def test_ids_stay_unique_across_adds():
    store = TaskStore()
    for i in range(50):
        store.add(f"task {i}")
    ids = [task.id for task in store.all()]
    assert len(ids) == len(set(ids)) == 50


def test_toggle_twice_restores_state(store):
    original = store.get("1").completed
    store.toggle("1")
    assert store.get("1").completed is (not original)
    store.toggle("1")
    assert store.get("1").completed is original


def test_toggle_only_replaces_the_target(store):
    before = store.all()
    toggled = store.toggle("2")
    after = store.all()
    assert toggled is after[1]
    assert toggled is not before[1]
    assert toggled.completed is False
    assert after[0] is before[0]
    assert after[2] is before[2]
    assert before[1].completed is True


def test_toggle_unknown_id_is_a_noop(store):
    before = store.all()
    assert store.toggle("missing") is None
    assert store.all() is before


def test_delete_keeps_order_of_the_rest(store):
    before = store.all()
    assert store.delete("2") is True
    assert store.all() == (before[0], before[2])
    assert store.get("2") is None


def test_delete_unknown_id_is_a_noop(store):
    before = store.all()
    assert store.delete("missing") is False
    assert store.all() is before


def test_duplicate_ids_are_rejected():
    task = Task(id="x", text="dup")
    with pytest.raises(ValueError):
        TaskStore([task, task])


def test_seed_tasks():
    seeded = seed_tasks()
    assert [task.text for task in seeded] == ["Complete project proposal", "Buy groceries", "Morning workout"]
    assert [task.completed for task in seeded] == [False, True, False]
    assert seeded[0].priority is Priority.HIGH
    assert len({task.id for task in seeded}) == 3
