from domain.entities import FilterCriteria


def test_board_defaults_to_default_criteria(use_cases):
    board = use_cases.board()
    assert board.criteria == FilterCriteria()
    assert [task.id for task in board.tasks] == ["1", "2", "3"]
    assert board.stats.total == 3


def test_mutations_return_a_recomputed_board(use_cases):
    criteria = FilterCriteria(show_completed=False)
    board = use_cases.create_task("New thing", criteria)
    assert [task.text for task in board.tasks][0] == "New thing"
    assert board.stats.total == 4
    assert board.criteria is criteria

    board = use_cases.toggle_task("1", criteria)
    assert "1" not in [task.id for task in board.tasks]
    assert board.stats.completed == 2

    board = use_cases.delete_task("2", criteria)
    assert board.stats.total == 3
    assert board.stats.remaining == 2


def test_blank_add_leaves_board_unchanged(use_cases):
    before = use_cases.get_all_tasks()
    board = use_cases.create_task("  ")
    assert use_cases.get_all_tasks() is before
    assert board.stats.total == 3
