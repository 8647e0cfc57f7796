# topic_accuracy/seed.py
from uuid import UUID, uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from topic_accuracy.state_manager import create_question, get_question, record_attempt
from topic_accuracy.utils.logger import logger

DEMO_QUESTIONS = [
    (1, "Algebra"),
    (2, "Calculus"),
    (3, "Algebra"),
]

# (question_id, is_correct)
DEMO_ATTEMPTS = [
    (1, True),
    (1, False),
    (2, True),
    (3, True),
]


async def seed_demo_data(session: AsyncSession, user_id: UUID | None = None) -> UUID:
    """
    Inserts the demo questions (if missing) and one round of demo attempts
    for `user_id`, then commits. Returns the user id the attempts belong to.

    Expected accuracy for that user: Algebra 66.67, Calculus 100.0.
    """
    user_id = user_id or uuid4()

    for question_id, topic in DEMO_QUESTIONS:
        if await get_question(session, question_id) is None:
            await create_question(session, topic, question_id=question_id)

    for question_id, is_correct in DEMO_ATTEMPTS:
        await record_attempt(session, user_id, question_id, is_correct)

    await session.commit()
    logger.info(f"Seeded {len(DEMO_ATTEMPTS)} demo attempts for user {user_id}.")
    return user_id
