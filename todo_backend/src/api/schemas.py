from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "Buy milk",
            }
        }
    )

    text: str = Field(..., description="What needs to be done", min_length=1)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """
        Strip whitespace; the remaining text must not be empty.
        """
        s = v.strip()
        if not s:
            raise ValueError("text must not be blank")
        return s


# PUBLIC_INTERFACE
class CompletionUpdate(BaseModel):
    """
    Body of the path-addressed completion update; the todo id comes from the URL.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"completed": True}})

    completed: StrictBool = Field(..., description="New completion status")


# PUBLIC_INTERFACE
class TodoCompletionUpdate(CompletionUpdate):
    """
    Schema for the typed-call form of updateTodoCompletion: ``{id, completed}``.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"id": 1, "completed": True}})

    id: int = Field(..., gt=0, description="Identifier of the todo to update")


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "text": "Buy milk",
                "completed": False,
                "created_at": "2025-01-25T10:15:30.123456+00:00",
            }
        }
    )

    id: int = Field(..., description="Unique identifier of the todo item")
    text: str = Field(..., description="Task text")
    completed: bool = Field(..., description="Completion status flag")
    created_at: datetime = Field(..., description="Creation timestamp")
