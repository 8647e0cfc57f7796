# Endpoints for creating and listing questions

# topic_accuracy/endpoints/questions.py
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from topic_accuracy.models.accuracy import QuestionCreate, QuestionOut
from topic_accuracy.state_manager import create_question, get_question, list_questions
from topic_accuracy.utils.db import get_db
from topic_accuracy.utils.logger import logger

router = APIRouter()

@router.post("/", response_model=QuestionOut, status_code=201)
async def add_question(question_create: QuestionCreate, db: AsyncSession = Depends(get_db)):
    try:
        question = await create_question(db, question_create.topic, question_id=question_create.id)
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.warning(f"Rejected duplicate question id {question_create.id}")
        raise HTTPException(status_code=409, detail="Question already exists")
    return question

@router.get("/", response_model=List[QuestionOut])
async def get_all_questions(db: AsyncSession = Depends(get_db)):
    return await list_questions(db)

@router.get("/{question_id}", response_model=QuestionOut)
async def get_single_question(question_id: int, db: AsyncSession = Depends(get_db)):
    question = await get_question(db, question_id)
    if not question:
        raise HTTPException(status_code=404, detail="Question not found")
    return question
