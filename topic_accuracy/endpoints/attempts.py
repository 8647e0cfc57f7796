# topic_accuracy/endpoints/attempts.py
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from topic_accuracy.models.accuracy import AttemptCreate, AttemptOut
from topic_accuracy.state_manager import QuestionNotFoundError, record_attempt
from topic_accuracy.utils.db import get_db
from topic_accuracy.utils.logger import logger

router = APIRouter()

@router.post("/", response_model=AttemptOut, status_code=201)
async def submit_attempt(request: AttemptCreate, db: AsyncSession = Depends(get_db)):
    """Records one answer submission for a user."""
    try:
        attempt = await record_attempt(db, request.user_id, request.question_id, request.is_correct)
    except QuestionNotFoundError as e:
        logger.info(f"Attempt rejected for user {request.user_id}: {e}")
        raise HTTPException(status_code=404, detail="Question not found")
    await db.commit()
    return attempt
