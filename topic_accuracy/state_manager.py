# topic_accuracy/state_manager.py
from typing import List
from uuid import UUID

from sqlalchemy.future import select
from sqlalchemy.ext.asyncio import AsyncSession

from topic_accuracy.models.question import Question, QuestionAttempt
from topic_accuracy.utils.logger import logger


class QuestionNotFoundError(LookupError):
    """Raised when an attempt references a question that does not exist."""

    def __init__(self, question_id: int):
        super().__init__(f"Question {question_id} not found")
        self.question_id = question_id


async def create_question(session: AsyncSession, topic: str, question_id: int | None = None) -> Question:
    """
    Adds a new question to the session and flushes it so the id is populated.
    The calling function is responsible for committing the transaction.
    """
    question = Question(id=question_id, topic=topic)
    session.add(question)
    await session.flush()
    logger.info(f"Added question {question.id} with topic '{topic}' to session.")
    return question

async def get_question(session: AsyncSession, question_id: int) -> Question | None:
    result = await session.execute(select(Question).filter_by(id=question_id))
    return result.scalars().first()

async def list_questions(session: AsyncSession) -> List[Question]:
    result = await session.execute(select(Question).order_by(Question.id))
    return list(result.scalars().all())

async def record_attempt(session: AsyncSession, user_id: UUID, question_id: int, is_correct: bool) -> QuestionAttempt:
    """
    Records one answer submission. Rejects attempts for unknown questions
    before touching the database so callers get a clear error instead of an
    integrity failure. The calling function is responsible for committing.
    """
    question = await get_question(session, question_id)
    if question is None:
        raise QuestionNotFoundError(question_id)

    attempt = QuestionAttempt(user_id=user_id, question_id=question_id, is_correct=is_correct)
    session.add(attempt)
    await session.flush()
    logger.debug(f"Recorded attempt {attempt.id}: user={user_id}, question={question_id}, correct={is_correct}")
    return attempt
