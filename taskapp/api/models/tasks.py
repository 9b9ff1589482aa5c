"""Personal task API models."""

from datetime import datetime

from pydantic import BaseModel, Field

from taskapp.domain.models.task import PersonalTask


class CreatePersonalTaskRequest(BaseModel):
    """Body for creating a personal task.

    Status defaults to "pendiente" when omitted.
    """

    name: str = Field(min_length=1, max_length=200)
    status: str | None = None
    description: str | None = None
    deadline: datetime | None = None
    category: str | None = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Pay rent",
                "status": "pendiente",
                "description": "Transfer before the 5th",
                "deadline": "2026-11-05T00:00:00Z",
                "category": "home",
            }
        },
    }


class UpdatePersonalTaskRequest(BaseModel):
    """Partial update; omitted fields stay unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    status: str | None = None
    description: str | None = None
    deadline: datetime | None = None
    category: str | None = None


class PersonalTaskResponse(BaseModel):
    id: str
    name: str
    status: str
    description: str | None = None
    deadline: datetime | None = None
    category: str | None = None
    user_id: str

    @classmethod
    def from_domain(cls, task: PersonalTask) -> "PersonalTaskResponse":
        return cls(**task.to_dict())


class PersonalTaskMutationResponse(BaseModel):
    message: str
    task: PersonalTaskResponse
