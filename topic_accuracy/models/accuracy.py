# Request/response shapes for questions, attempts and accuracy reports
# topic_accuracy/models/accuracy.py
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from uuid import UUID

class QuestionCreate(BaseModel):
    topic: str = Field(min_length=1, max_length=100)
    id: int | None = None # Let the database assign one when omitted

class QuestionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    topic: str

class AttemptCreate(BaseModel):
    user_id: UUID
    question_id: int
    is_correct: bool

class AttemptOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: UUID
    question_id: int
    is_correct: bool
    created_at: datetime | None = None

class TopicTally(BaseModel):
    """Per-topic counts for one user, plus the derived accuracy percentage."""
    topic: str
    total: int
    correct: int
    accuracy: float
