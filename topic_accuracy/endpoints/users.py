# topic_accuracy/endpoints/users.py
from fastapi import APIRouter, HTTPException, Depends
from typing import Dict, List
from uuid import UUID
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from topic_accuracy.models.accuracy import TopicTally
from topic_accuracy.services.accuracy_service import (
    calculate_user_topic_accuracy,
    calculate_user_topic_tallies,
)
from topic_accuracy.utils.config import settings
from topic_accuracy.utils.db import get_db
from topic_accuracy.utils.logger import logger

router = APIRouter(
    tags=["Users"]
)

@router.get("/{user_id}/topic-accuracy", response_model=Dict[str, float])
async def get_user_topic_accuracy(user_id: UUID, db: AsyncSession = Depends(get_db)):
    """
    Returns the accuracy percentage for every topic the user has attempted.
    Users without attempts get an empty mapping.
    """
    logger.debug(f"Fetching topic accuracy for user_id: {user_id}")
    try:
        return await calculate_user_topic_accuracy(db, user_id, settings.accuracy_round_digits)
    except SQLAlchemyError as e:
        logger.exception(f"Database error computing topic accuracy for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error computing topic accuracy")

@router.get("/{user_id}/topic-tallies", response_model=List[TopicTally])
async def get_user_topic_tallies(user_id: UUID, db: AsyncSession = Depends(get_db)):
    """Same report as /topic-accuracy with the raw attempt counts included."""
    logger.debug(f"Fetching topic tallies for user_id: {user_id}")
    try:
        return await calculate_user_topic_tallies(db, user_id, settings.accuracy_round_digits)
    except SQLAlchemyError as e:
        logger.exception(f"Database error computing topic tallies for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error computing topic tallies")
