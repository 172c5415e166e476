"""
Scoped PostgreSQL connections for the repositories.

``get_connection`` is the default connection factory handed to
``BookRepository``. Any replacement must keep the same shape: a
zero-argument callable returning a context manager that yields a psycopg
connection and releases it when the block exits.

Tests pin every factory call to one fixture-owned connection with
``override_connection`` so the whole test can be rolled back.
"""

from contextlib import contextmanager
from typing import Callable, ContextManager

import psycopg
from psycopg.rows import dict_row

from bookstore.config import config

ConnectionFactory = Callable[[], ContextManager[psycopg.Connection]]

_pinned: psycopg.Connection | None = None


@contextmanager
def override_connection(conn: psycopg.Connection):
    """
    Route every ``get_connection`` call to ``conn`` for the duration of the block.

    The pinned connection is never committed, rolled back, or closed by
    ``get_connection``; its owner decides what happens to the transaction.
    """
    global _pinned
    previous, _pinned = _pinned, conn
    try:
        yield conn
    finally:
        _pinned = previous


@contextmanager
def get_connection():
    """
    Open a connection to ``config.database_url`` for one unit of work.

    The statement(s) run inside the block are committed when it exits
    normally and rolled back when it raises. The connection is closed
    either way. Errors raised by ``psycopg.connect`` (for example an
    unreachable server within ``config.connect_timeout`` seconds)
    propagate unchanged to the caller.
    """
    if _pinned is not None:
        yield _pinned
        return

    conn = psycopg.connect(config.database_url, connect_timeout=config.connect_timeout)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def get_cursor(connect: ConnectionFactory = None):
    """
    Yield a ``dict_row`` cursor on a connection taken from ``connect``.

    Defaults to ``get_connection``. Rows come back as ``{column: value}``.
    """
    with (connect or get_connection)() as conn:
        with conn.cursor(row_factory=dict_row) as cur:
            yield cur
