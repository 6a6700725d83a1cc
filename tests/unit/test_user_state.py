"""Unit tests for user state assembly."""
from types import SimpleNamespace
from unittest.mock import MagicMock, call

import pytest

from organizer.core.errors import InvalidArgument, StoreFailure
from organizer.services.user_state import assemble_user_state, collect_owner_ids
from organizer.store import Store

USER = {"id": "user-1", "name": "testuser", "passwordHash": "hash"}


@pytest.fixture
def collections():
    """Mock collections, keyed by name."""
    mocks = {name: MagicMock(name=name) for name in ("tasks", "comments", "users", "groups")}
    mocks["tasks"].find.return_value = []
    mocks["comments"].find.return_value = []
    mocks["users"].find.return_value = []
    mocks["users"].find_one.return_value = USER
    mocks["groups"].find.return_value = []
    return mocks


@pytest.fixture
def mock_store(collections):
    """Store double handing out the mock collections."""
    store = MagicMock(spec=Store)
    store.collection.side_effect = lambda name: collections[name]
    return store


@pytest.mark.parametrize("user", [None, {"name": "x"}, {"id": None}, {"id": ""}, SimpleNamespace()])
def test_rejects_user_without_id(mock_store, user):
    """A missing user or id fails before the store is touched."""
    with pytest.raises(InvalidArgument, match="User and user.id are required"):
        assemble_user_state(mock_store, user)

    mock_store.collection.assert_not_called()


def test_accepts_objects_with_id(mock_store, collections):
    """Any object carrying an id attribute works."""
    state = assemble_user_state(mock_store, SimpleNamespace(id="user-1"))
    assert state["session"] == {"authenticated": "AUTHENTICATED", "id": "user-1"}
    collections["tasks"].find.assert_called_once_with({"owner": "user-1"})


def test_queries(mock_store, collections):
    """Each collection is queried with the expected filter."""
    collections["tasks"].find.return_value = [
        {"id": "task-1", "owner": "user-1"},
        {"id": "task-2", "owner": "user-1"},
    ]

    assemble_user_state(mock_store, {"id": "user-1"})

    collections["tasks"].find.assert_called_once_with({"owner": "user-1"})
    collections["comments"].find.assert_called_once_with({"task": {"$in": ["task-1", "task-2"]}})
    collections["users"].find.assert_called_once_with({"id": {"$in": ["user-1", "user-1"]}})
    collections["users"].find_one.assert_called_once_with({"id": "user-1"})
    collections["groups"].find.assert_called_once_with({"owner": "user-1"})


def test_query_order(mock_store):
    """Tasks, comments, related users, own user, then groups."""
    assemble_user_state(mock_store, {"id": "user-1"})
    assert mock_store.collection.call_args_list == [
        call("tasks"),
        call("comments"),
        call("users"),
        call("users"),
        call("groups"),
    ]


def test_no_tasks_still_queries_comments(mock_store, collections):
    """With no tasks the comment query runs with an empty membership filter."""
    state = assemble_user_state(mock_store, {"id": "user-1"})

    collections["comments"].find.assert_called_once_with({"task": {"$in": []}})
    collections["users"].find.assert_called_once_with({"id": {"$in": []}})
    assert state["tasks"] == []
    assert state["comments"] == []
    assert state["users"] == [USER]


def test_result_shape(mock_store, collections):
    """The state combines every query result."""
    tasks = [{"id": "task-1", "name": "A", "isComplete": False, "owner": "user-1"}]
    comments = [{"id": "c-1", "task": "task-1", "owner": "user-2", "content": "hi"}]
    groups = [{"id": "g-1", "owner": "user-1", "name": "To Do"}]
    collections["tasks"].find.return_value = tasks
    collections["comments"].find.return_value = comments
    collections["users"].find.return_value = [USER]
    collections["groups"].find.return_value = groups

    state = assemble_user_state(mock_store, {"id": "user-1"})

    assert state == {
        "session": {"authenticated": "AUTHENTICATED", "id": "user-1"},
        "groups": groups,
        "tasks": tasks,
        "users": [USER, USER],
        "comments": comments,
    }


def test_missing_own_user_is_dropped(mock_store, collections):
    """A user lookup miss does not fail the call."""
    collections["users"].find_one.return_value = None
    state = assemble_user_state(mock_store, {"id": "ghost"})
    assert state["users"] == []


@pytest.mark.parametrize("failing", ["tasks", "comments", "users", "groups"])
def test_store_errors_propagate(mock_store, collections, failing):
    """Query failures reach the caller unchanged."""
    error = StoreFailure(f"{failing} query failed")
    collections[failing].find.side_effect = error

    with pytest.raises(StoreFailure) as exc_info:
        assemble_user_state(mock_store, {"id": "user-1"})

    assert exc_info.value is error


def test_collect_owner_ids_ignores_comment_owners():
    """Only task owners are collected, duplicates included."""
    tasks = [{"id": "t1", "owner": "user-1"}, {"id": "t2", "owner": "user-1"}, {"id": "t3"}]
    comments = [{"id": "c1", "owner": "user-2"}, {"id": "c2", "owner": "user-3"}]

    assert collect_owner_ids(tasks, comments) == ["user-1", "user-1"]


def test_assembles_from_real_store(store):
    """End to end against the database, including the duplicate user entry."""
    store.collection("users").insert_one({"id": "user-1", "name": "alice", "passwordHash": "h"})
    store.collection("users").insert_one({"id": "user-2", "name": "bob", "passwordHash": "h"})
    for i in range(3):
        store.collection("tasks").insert_one(
            {"id": f"task-{i}", "name": f"Task {i}", "isComplete": False, "owner": "user-1"}
        )
    store.collection("tasks").insert_one(
        {"id": "other", "name": "Not mine", "isComplete": False, "owner": "user-2"}
    )
    store.collection("comments").insert_one(
        {"id": "c-1", "task": "task-0", "owner": "user-2", "content": "Looks good"}
    )
    store.collection("comments").insert_one(
        {"id": "c-2", "task": "other", "owner": "user-2", "content": "Elsewhere"}
    )
    store.collection("groups").insert_one({"id": "g-1", "owner": "user-1", "name": "To Do"})
    store.collection("groups").insert_one({"id": "g-2", "owner": "user-2", "name": "To Do"})

    state = assemble_user_state(store, {"id": "user-1"})

    assert sorted(task["id"] for task in state["tasks"]) == ["task-0", "task-1", "task-2"]
    assert [comment["id"] for comment in state["comments"]] == ["c-1"]
    assert [group["id"] for group in state["groups"]] == ["g-1"]
    # Own document, then one match for the three task owner entries.
    # The commenter is not included.
    assert [user["id"] for user in state["users"]] == ["user-1", "user-1"]
