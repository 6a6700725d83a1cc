"""Task and comment routes."""
from fastapi import APIRouter, Response, status

from organizer.api.deps import DocumentStore
from organizer.schemas.task import NewCommentRequest, NewTaskRequest, TaskUpdateRequest
from organizer.services.task_service import add_comment, add_new_task, update_task

router = APIRouter(tags=["tasks"])


@router.post("/task/new")
def create_task(body: NewTaskRequest, store: DocumentStore):
    """Store a new task."""
    add_new_task(store, body.task.model_dump(by_alias=True, exclude_none=True))
    return Response(status_code=status.HTTP_200_OK)


@router.post("/task/update")
def change_task(body: TaskUpdateRequest, store: DocumentStore):
    """
    Update a task.

    Only the fields present in the request are written. A null ``group``
    clears the task's group; a null ``name`` or ``isComplete`` is rejected
    with 422 before anything is written.
    """
    update_task(store, body.task.model_dump(by_alias=True, exclude_unset=True))
    return Response(status_code=status.HTTP_200_OK)


@router.post("/comment/new")
def create_comment(body: NewCommentRequest, store: DocumentStore):
    """Store a new comment."""
    add_comment(store, body.comment.model_dump())
    return Response(status_code=status.HTTP_200_OK)
