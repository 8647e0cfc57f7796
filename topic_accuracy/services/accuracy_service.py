# topic_accuracy/services/accuracy_service.py
from collections import defaultdict
from typing import Dict, List
from uuid import UUID

from sqlalchemy import case, func
from sqlalchemy.future import select
from sqlalchemy.ext.asyncio import AsyncSession

from topic_accuracy.models.question import Question, QuestionAttempt
from topic_accuracy.models.accuracy import TopicTally
from topic_accuracy.utils.logger import logger


def _percentage(correct: int, total: int, round_digits: int | None) -> float:
    accuracy = (correct / total) * 100
    if round_digits is not None:
        accuracy = round(accuracy, round_digits)
    return accuracy


async def calculate_user_topic_tallies(session: AsyncSession, user_id: UUID,
                                       round_digits: int | None = None) -> List[TopicTally]:
    """
    Returns total and correct attempt counts per topic for one user, ordered by topic.

    Everything is computed by the database in one grouped join; topics the user
    never attempted produce no row, so `total` is always at least 1.
    Database errors propagate to the caller unchanged.
    """
    correct_expr = func.sum(case((QuestionAttempt.is_correct.is_(True), 1), else_=0))
    stmt = (
        select(
            Question.topic.label("topic"),
            func.count().label("total"),
            correct_expr.label("correct"),
        )
        .select_from(QuestionAttempt)
        .join(Question, Question.id == QuestionAttempt.question_id)
        .where(QuestionAttempt.user_id == user_id)
        .group_by(Question.topic)
        .order_by(Question.topic)
    )
    result = await session.execute(stmt)

    tallies = []
    for row in result.all():
        total = int(row.total)
        correct = int(row.correct or 0)
        tallies.append(TopicTally(
            topic=row.topic,
            total=total,
            correct=correct,
            accuracy=_percentage(correct, total, round_digits),
        ))
    logger.debug(f"Computed {len(tallies)} topic tallies for user {user_id}")
    return tallies


async def calculate_user_topic_accuracy(session: AsyncSession, user_id: UUID,
                                        round_digits: int | None = None) -> Dict[str, float]:
    """Maps each topic the user attempted to its accuracy percentage (0-100)."""
    tallies = await calculate_user_topic_tallies(session, user_id, round_digits)
    return {tally.topic: tally.accuracy for tally in tallies}


async def calculate_user_topic_accuracy_naive(session: AsyncSession, user_id: UUID,
                                              round_digits: int | None = None) -> Dict[str, float]:
    """
    Reference implementation that looks up each attempt's question separately.
    Issues 1 + N statements for N attempts; kept for benchmarks and regression tests.
    """
    result = await session.execute(
        select(QuestionAttempt).where(QuestionAttempt.user_id == user_id)
    )
    attempts = result.scalars().all()

    topic_stats: Dict[str, Dict[str, int]] = defaultdict(lambda: {"total": 0, "correct": 0})
    for attempt in attempts:
        # One query per attempt
        question_result = await session.execute(
            select(Question).where(Question.id == attempt.question_id)
        )
        question = question_result.scalars().first()
        if question is None:
            logger.warning(f"Attempt {attempt.id} references missing question {attempt.question_id}")
            continue

        stats = topic_stats[question.topic]
        stats["total"] += 1
        if attempt.is_correct:
            stats["correct"] += 1

    return {
        topic: _percentage(stats["correct"], stats["total"], round_digits)
        for topic, stats in topic_stats.items()
    }
