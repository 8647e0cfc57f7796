# evaluation/benchmark_accuracy.py
# Compares the grouped single-query accuracy report with the per-attempt lookup strategy.
import argparse
import asyncio
import os
import random
import sys
import time
import uuid

import pandas as pd

# Add project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from topic_accuracy.models.question import Base, Question, QuestionAttempt
from topic_accuracy.services.accuracy_service import (
    calculate_user_topic_accuracy,
    calculate_user_topic_accuracy_naive,
)
from topic_accuracy.utils.db import build_engine, build_session_factory
from topic_accuracy.utils.query_counter import count_queries

TOPICS = ["Algebra", "Calculus", "Geometry", "Statistics", "Trigonometry"]
STRATEGIES = {
    "grouped_join": calculate_user_topic_accuracy,
    "per_attempt_lookup": calculate_user_topic_accuracy_naive,
}


async def _populate(session_factory, n_questions: int, n_attempts: int, n_users: int, rng: random.Random) -> uuid.UUID:
    """Fills the database with random questions and attempts; returns the user to report on."""
    users = [uuid.uuid4() for _ in range(n_users)]
    async with session_factory() as session:
        session.add_all(
            Question(id=i, topic=rng.choice(TOPICS)) for i in range(1, n_questions + 1)
        )
        session.add_all(
            QuestionAttempt(
                user_id=rng.choice(users),
                question_id=rng.randint(1, n_questions),
                is_correct=rng.random() < 0.6,
            )
            for _ in range(n_attempts)
        )
        await session.commit()
    return users[0]


async def run_benchmark(n_questions: int, n_attempts: int, n_users: int, repeats: int, seed: int) -> pd.DataFrame:
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    session_factory = build_session_factory(engine)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        user_id = await _populate(session_factory, n_questions, n_attempts, n_users, random.Random(seed))

        rows = []
        reference = None
        for name, strategy in STRATEGIES.items():
            for run in range(repeats):
                async with session_factory() as session:
                    with count_queries(engine) as counter:
                        start = time.perf_counter()
                        result = await strategy(session, user_id, 2)
                        elapsed_ms = (time.perf_counter() - start) * 1000
                if reference is None:
                    reference = result
                rows.append({
                    "strategy": name,
                    "run": run + 1,
                    "queries": counter.count,
                    "elapsed_ms": elapsed_ms,
                    "matches_reference": result == reference,
                })
        return pd.DataFrame(rows)
    finally:
        await engine.dispose()


def main():
    parser = argparse.ArgumentParser(description="Benchmark topic accuracy query strategies.")
    parser.add_argument("--questions", type=int, default=50, help="Number of questions to create.")
    parser.add_argument("--attempts", type=int, default=2000, help="Number of attempts across all users.")
    parser.add_argument("--users", type=int, default=10, help="Number of distinct users.")
    parser.add_argument("--repeats", type=int, default=3, help="Runs per strategy.")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for the generated data.")
    args = parser.parse_args()

    df = asyncio.run(run_benchmark(args.questions, args.attempts, args.users, args.repeats, args.seed))

    print("\n--- Per-run results ---")
    print(df.to_string(index=False))
    print("\n--- Summary ---")
    summary = df.groupby("strategy").agg(
        queries=("queries", "max"),
        mean_ms=("elapsed_ms", "mean"),
        all_match=("matches_reference", "all"),
    )
    print(summary.to_string())


if __name__ == "__main__":
    main()
