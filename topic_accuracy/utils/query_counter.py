# topic_accuracy/utils/query_counter.py
from contextlib import contextmanager
from typing import Iterator, List

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine


class QueryCounter:
    """Collects the SQL statements an engine executes while it is attached."""

    def __init__(self):
        self.statements: List[str] = []

    @property
    def count(self) -> int:
        return len(self.statements)

    def __call__(self, conn, cursor, statement, parameters, context, executemany):
        self.statements.append(statement)


@contextmanager
def count_queries(engine: AsyncEngine) -> Iterator[QueryCounter]:
    """
    Counts statements sent to the database inside the block.

    Async engines dispatch their events through the underlying sync engine,
    so the listener is registered there.
    """
    sync_engine = engine.sync_engine
    counter = QueryCounter()
    event.listen(sync_engine, "before_cursor_execute", counter)
    try:
        yield counter
    finally:
        event.remove(sync_engine, "before_cursor_execute", counter)
