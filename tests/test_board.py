"""
Tests for the Kanban board: columns, filters, members and drop handling.
"""

import pytest
from rest_framework.test import RequestsClient

from tasks.models import Task, TaskStatus
from taskboard_client import COLUMNS, ApiClient, AuthStore, KanbanBoard, ProjectStore, TaskStore

from conftest import PASSWORD


class StubTaskStore:
    """Holds tasks in memory and records the status updates it is asked for."""

    def __init__(self, tasks):
        self.tasks = tasks
        self.updates = []

    def update_task_status(self, task_id, status):
        self.updates.append((task_id, status))
        for task in self.tasks:
            if task["id"] == task_id:
                task["status"] = status
        return True


def make_task(task_id, name, status="pendiente", priority="media", assignee_id=None):
    return {
        "id": task_id,
        "name": name,
        "status": status,
        "priority": priority,
        "assignedTo": {"id": assignee_id, "name": f"User {assignee_id}", "email": "x@example.com"} if assignee_id else None,
    }


@pytest.fixture
def store():
    return StubTaskStore([
        make_task(1, "Write copy", priority="alta", assignee_id=10),
        make_task(2, "Design logo", status="en progreso", assignee_id=11),
        make_task(3, "Deploy", status="completada", priority="baja"),
        make_task(4, "Write tests", status="en progreso", priority="alta", assignee_id=10),
    ])


@pytest.fixture
def board(store):
    return KanbanBoard(store)


class TestColumns:

    def test_fixed_column_order(self, board):
        assert list(board.columns()) == list(COLUMNS) == ["pendiente", "en progreso", "completada"]

    def test_tasks_grouped_by_status(self, board):
        columns = board.columns()

        assert [t["id"] for t in columns["pendiente"]] == [1]
        assert [t["id"] for t in columns["en progreso"]] == [2, 4]
        assert [t["id"] for t in columns["completada"]] == [3]

    def test_counts(self, board):
        assert board.counts() == {"pendiente": 1, "en progreso": 2, "completada": 1}

    def test_empty_board_has_every_column(self):
        board = KanbanBoard(StubTaskStore([]))

        assert board.counts() == {"pendiente": 0, "en progreso": 0, "completada": 0}


class TestFilters:

    def test_name_search_is_case_insensitive(self, board):
        board.set_filters(search="WRITE")

        assert [t["id"] for t in board.visible_tasks()] == [1, 4]

    def test_priority(self, board):
        board.set_filters(priority="alta")

        assert [t["id"] for t in board.visible_tasks()] == [1, 4]

    def test_assignee_accepts_string_ids(self, board):
        board.set_filters(assignee="11")

        assert [t["id"] for t in board.visible_tasks()] == [2]

    def test_filters_combine(self, board):
        board.set_filters(search="write", priority="alta", assignee=10)

        assert board.counts() == {"pendiente": 1, "en progreso": 1, "completada": 0}

    def test_filters_do_not_touch_store(self, board, store):
        board.set_filters(search="deploy")

        assert len(board.visible_tasks()) == 1
        assert len(store.tasks) == 4

    def test_clear_filters(self, board):
        board.set_filters(search="deploy", priority="baja")
        board.clear_filters()

        assert len(board.visible_tasks()) == 4

    def test_empty_value_resets_one_filter(self, board):
        board.set_filters(priority="alta", assignee=10)
        board.set_filters(priority="")

        assert [t["id"] for t in board.visible_tasks()] == [1, 4]


class TestDrop:

    def test_drop_on_column(self, board, store):
        assert board.drop(1, "completada")

        assert store.updates == [(1, "completada")]

    def test_drop_on_task_inherits_its_column(self, board, store):
        assert board.drop(1, 2)

        assert store.updates == [(1, "en progreso")]

    def test_any_status_can_move_back(self, board, store):
        assert board.drop(3, "pendiente")

        assert store.updates == [(3, "pendiente")]

    def test_same_status_is_noop(self, board, store):
        assert not board.drop(2, "en progreso")
        assert not board.drop(2, 4)

        assert store.updates == []

    def test_unknown_task_is_ignored(self, board, store):
        assert not board.drop(99, "completada")

        assert store.updates == []

    def test_unknown_destination_is_ignored(self, board, store):
        assert not board.drop(1, "archivada")
        assert not board.drop(1, 99)

        assert store.updates == []

    def test_string_ids_are_matched(self, board, store):
        assert board.drop("1", "3")

        assert store.updates == [(1, "completada")]

    def test_hidden_tasks_can_still_be_dropped_on(self, board, store):
        board.set_filters(search="write")

        assert board.drop(1, 3)

        assert store.updates == [(1, "completada")]


class TestMembers:

    def test_owner_first_then_collaborators(self, store):
        owner = {"id": 10, "name": "Alice", "email": "alice@example.com"}
        bob = {"id": 11, "name": "Bob", "email": "bob@example.com"}
        carol = {"id": 12, "name": "Carol", "email": "carol@example.com"}
        board = KanbanBoard(store, project={"owner": owner, "collaborators": [bob, carol]})

        assert board.members() == [owner, bob, carol]

    def test_no_project(self, board):
        assert board.members() == []


class TestBoardAgainstServer:

    def test_drop_updates_server(self, db, owner):
        api = ApiClient("http://testserver", session=RequestsClient())
        AuthStore(api).login(owner.email, PASSWORD)
        project = ProjectStore(api).create_project("Launch")
        tasks = TaskStore(api)
        first = tasks.create_task("First", project["id"])
        second = tasks.create_task("Second", project["id"])
        tasks.update_task_status(second["id"], "completada")
        board = KanbanBoard(tasks, project=project)

        assert board.drop(first["id"], second["id"])

        assert Task.objects.get(pk=first["id"]).status == TaskStatus.COMPLETED
        assert board.counts() == {"pendiente": 0, "en progreso": 0, "completada": 2}
        assert board.members() == [project["owner"]]
