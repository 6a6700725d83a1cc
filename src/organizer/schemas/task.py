"""Task, comment and group Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskDocument(BaseModel):
    """Schema for a task as stored."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str
    is_complete: bool = Field(False, alias="isComplete")
    owner: str = Field(..., min_length=1, description="Owning user id")
    group: str | None = Field(None, description="Group id")


class TaskUpdate(BaseModel):
    """
    Schema for updating a task. Only the fields sent are changed.

    ``group`` may be sent as null to ungroup the task; ``name`` and
    ``isComplete`` may be omitted but not nulled.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str | None = None
    is_complete: bool | None = Field(None, alias="isComplete")
    group: str | None = None

    @field_validator("name", "is_complete")
    @classmethod
    def validate_not_null(cls, v, info):
        """Reject an explicit null for fields every task must have."""
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class CommentDocument(BaseModel):
    """Schema for a comment as stored."""

    id: str = Field(..., min_length=1)
    task: str = Field(..., min_length=1, description="Task id")
    owner: str = Field(..., min_length=1, description="Author user id")
    content: str


class GroupDocument(BaseModel):
    """Schema for a group as stored."""

    id: str
    owner: str
    name: str


class NewTaskRequest(BaseModel):
    """Request body for creating a task."""

    task: TaskDocument


class TaskUpdateRequest(BaseModel):
    """Request body for updating a task."""

    task: TaskUpdate


class NewCommentRequest(BaseModel):
    """Request body for adding a comment."""

    comment: CommentDocument
