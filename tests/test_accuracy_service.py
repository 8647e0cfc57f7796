# tests/test_accuracy_service.py
import uuid

import pytest
from sqlalchemy.exc import OperationalError

from topic_accuracy.models.question import Base
from topic_accuracy.services.accuracy_service import (
    calculate_user_topic_accuracy,
    calculate_user_topic_accuracy_naive,
    calculate_user_topic_tallies,
)
from topic_accuracy.state_manager import create_question, record_attempt
from topic_accuracy.utils.db import build_engine, build_session_factory
from topic_accuracy.utils.query_counter import count_queries


@pytest.mark.asyncio
class TestTopicAccuracy:

    async def test_demo_scenario_rounded(self, session, demo_user_id):
        accuracies = await calculate_user_topic_accuracy(session, demo_user_id, round_digits=2)
        assert accuracies == {"Algebra": 66.67, "Calculus": 100.0}

    async def test_exact_percentage_without_rounding(self, session, demo_user_id):
        accuracies = await calculate_user_topic_accuracy(session, demo_user_id)
        assert accuracies["Algebra"] == (2 / 3) * 100
        assert accuracies["Calculus"] == 100.0

    async def test_user_without_attempts_gets_empty_mapping(self, session, demo_user_id):
        accuracies = await calculate_user_topic_accuracy(session, uuid.uuid4())
        assert accuracies == {}

    async def test_empty_store(self, session):
        assert await calculate_user_topic_accuracy(session, uuid.uuid4()) == {}

    async def test_other_users_do_not_affect_result(self, session, demo_user_id):
        other_user = uuid.uuid4()
        # Another user fails every Algebra question and answers Calculus wrong
        for question_id in (1, 1, 3, 2):
            await record_attempt(session, other_user, question_id, False)
        await session.commit()

        assert await calculate_user_topic_accuracy(session, demo_user_id, round_digits=2) == {
            "Algebra": 66.67,
            "Calculus": 100.0,
        }
        assert await calculate_user_topic_accuracy(session, other_user) == {
            "Algebra": 0.0,
            "Calculus": 0.0,
        }

    async def test_unattempted_topics_are_omitted(self, session, demo_user_id):
        await create_question(session, "Geometry", question_id=4)
        await session.commit()

        accuracies = await calculate_user_topic_accuracy(session, demo_user_id)
        assert "Geometry" not in accuracies
        assert set(accuracies) == {"Algebra", "Calculus"}

    async def test_tallies_expose_counts(self, session, demo_user_id):
        tallies = await calculate_user_topic_tallies(session, demo_user_id, round_digits=2)
        assert [(t.topic, t.total, t.correct, t.accuracy) for t in tallies] == [
            ("Algebra", 3, 2, 66.67),
            ("Calculus", 1, 1, 100.0),
        ]

    async def test_single_query(self, engine, session_factory, demo_user_id):
        async with session_factory() as fresh_session:
            with count_queries(engine) as counter:
                await calculate_user_topic_accuracy(fresh_session, demo_user_id)
        assert counter.count == 1, counter.statements
        assert "JOIN questions" in counter.statements[0]
        assert "GROUP BY questions.topic" in counter.statements[0]

    async def test_single_query_regardless_of_attempt_count(self, engine, session_factory, session, demo_user_id):
        for _ in range(20):
            await record_attempt(session, demo_user_id, 2, False)
        await session.commit()

        async with session_factory() as fresh_session:
            with count_queries(engine) as counter:
                accuracies = await calculate_user_topic_accuracy(fresh_session, demo_user_id, round_digits=2)
        assert counter.count == 1
        assert accuracies["Calculus"] == round(1 / 21 * 100, 2)


@pytest.mark.asyncio
class TestNaiveStrategy:

    async def test_matches_single_query_result(self, session, demo_user_id):
        naive = await calculate_user_topic_accuracy_naive(session, demo_user_id)
        grouped = await calculate_user_topic_accuracy(session, demo_user_id)
        assert naive == grouped

    async def test_issues_one_query_per_attempt(self, engine, session_factory, demo_user_id):
        async with session_factory() as fresh_session:
            with count_queries(engine) as counter:
                await calculate_user_topic_accuracy_naive(fresh_session, demo_user_id)
        # One query for the attempts plus one lookup for each of the four attempts
        assert counter.count == 5


@pytest.mark.asyncio
async def test_database_failure_propagates():
    """Without tables the query fails and the driver error reaches the caller."""
    bare_engine = build_engine("sqlite+aiosqlite:///:memory:")
    try:
        async with build_session_factory(bare_engine)() as session:
            with pytest.raises(OperationalError):
                await calculate_user_topic_accuracy(session, uuid.uuid4())
    finally:
        await bare_engine.dispose()


def test_tables_are_declared():
    assert set(Base.metadata.tables) == {"questions", "question_attempts"}
