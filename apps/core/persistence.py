"""
Persistence Adapter
===================

Uniform statement-level access to the relational store for the code paths
that need plain SQL (atomic counters, joined listings, search, scripts).
Two engines are supported behind one contract:

    SQLiteAdapter    local embedded database (development, tests)
    PostgresAdapter  networked database (Railway, via DATABASE_URL)

Contract:
    run(sql, params)         execute, no result (row count returned)
    get(sql, params)         first row as a dict, or None
    all(sql, params)         every row as a list of dicts
    exec_script(script)      several statements, no params

Statements use ``%s`` placeholders on both engines; Django's cursor
translates them for SQLite. The only engine-specific SQL lives in the
adapter subclasses (``insert_ignore`` and ``like_operator``), so callers
never branch on the engine.

A uniqueness violation raises ``ConflictError``. Each write runs in its own
savepoint, so a conflict leaves an enclosing transaction usable.

Example::

    from apps.core.persistence import get_adapter

    db = get_adapter()
    row = db.get('SELECT nombre FROM usuarios WHERE cedula = %s', ['111'])
"""
import logging
from datetime import datetime, timezone as dt_timezone

import sqlparse
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import DEFAULT_DB_ALIAS, IntegrityError, connections, transaction
from django.utils import timezone

from .exceptions import ConflictError

logger = logging.getLogger(__name__)


class BaseAdapter:
    """Shared implementation of the four-operation contract."""

    vendor = None
    like_operator = 'LIKE'
    like_escape = "ESCAPE '\\'"

    def __init__(self, alias=DEFAULT_DB_ALIAS):
        self.alias = alias

    def __repr__(self):
        return f'<{type(self).__name__} alias={self.alias!r}>'

    @property
    def connection(self):
        return connections[self.alias]

    def quote_name(self, name):
        return self.connection.ops.quote_name(name)

    def run(self, sql, params=()):
        """Execute a statement that returns no rows. Returns the row count."""
        try:
            with transaction.atomic(using=self.alias):
                with self.connection.cursor() as cursor:
                    cursor.execute(sql, list(params))
                    return cursor.rowcount
        except IntegrityError as e:
            logger.info('Unique constraint violated: %s', e)
            raise ConflictError(str(e)) from e

    def get(self, sql, params=()):
        """Return the first row as a dict, or None."""
        with self.connection.cursor() as cursor:
            cursor.execute(sql, list(params))
            row = cursor.fetchone()
            if row is None:
                return None
            return self.normalize_row(dict(zip(self._columns(cursor), row)))

    def all(self, sql, params=()):
        """Return every row as a list of dicts."""
        with self.connection.cursor() as cursor:
            cursor.execute(sql, list(params))
            columns = self._columns(cursor)
            return [self.normalize_row(dict(zip(columns, row))) for row in cursor.fetchall()]

    def exec_script(self, script):
        """
        Execute a multi-statement script atomically.

        The script is split with sqlparse (as Django's RunSQL does) and each
        statement is sent on its own, without parameters.
        """
        statements = [
            statement for statement in sqlparse.split(
                sqlparse.format(script, strip_comments=True)
            )
            if statement.strip()
        ]
        try:
            with transaction.atomic(using=self.alias):
                with self.connection.cursor() as cursor:
                    for statement in statements:
                        cursor.execute(statement)
        except IntegrityError as e:
            raise ConflictError(str(e)) from e
        return len(statements)

    def insert_ignore(self, table, columns, values):
        """Insert one row unless it violates a unique constraint."""
        if len(columns) != len(values):
            raise ValueError('columns and values must have the same length')
        sql = self.insert_ignore_sql(
            self.quote_name(table),
            ', '.join(self.quote_name(column) for column in columns),
            ', '.join(['%s'] * len(values)),
        )
        return self.run(sql, values)

    def escape_like(self, value):
        """Escape LIKE wildcards so ``value`` matches literally; pair with ``like_escape``."""
        return value.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')

    def normalize_row(self, row):
        """Engine-specific value fixes so rows look the same on every engine."""
        return row

    def insert_ignore_sql(self, table, columns, placeholders):
        raise NotImplementedError

    @staticmethod
    def _columns(cursor):
        return [column[0] for column in cursor.description]


class SQLiteAdapter(BaseAdapter):
    """Embedded SQLite engine."""

    vendor = 'sqlite'
    # SQLite LIKE is already case-insensitive for ASCII
    like_operator = 'LIKE'

    def normalize_row(self, row):
        # Raw SQLite cursors return naive UTC datetimes
        if settings.USE_TZ:
            for key, value in row.items():
                if isinstance(value, datetime) and timezone.is_naive(value):
                    row[key] = timezone.make_aware(value, dt_timezone.utc)
        return row

    def insert_ignore_sql(self, table, columns, placeholders):
        return f'INSERT OR IGNORE INTO {table} ({columns}) VALUES ({placeholders})'


class PostgresAdapter(BaseAdapter):
    """Networked PostgreSQL engine."""

    vendor = 'postgresql'
    like_operator = 'ILIKE'

    def insert_ignore_sql(self, table, columns, placeholders):
        return (
            f'INSERT INTO {table} ({columns}) VALUES ({placeholders}) '
            'ON CONFLICT DO NOTHING'
        )


ADAPTERS = {
    adapter.vendor: adapter for adapter in (SQLiteAdapter, PostgresAdapter)
}

_adapters = {}


def get_adapter(alias=DEFAULT_DB_ALIAS):
    """
    Return the adapter for a connection alias.

    The implementation is chosen from the configured engine the first time
    an alias is requested and reused afterwards.
    """
    if alias not in _adapters:
        vendor = connections[alias].vendor
        try:
            adapter_class = ADAPTERS[vendor]
        except KeyError:
            raise ImproperlyConfigured(
                f"Unsupported database engine '{vendor}' for alias '{alias}'. "
                f"Supported: {', '.join(sorted(ADAPTERS))}"
            )
        _adapters[alias] = adapter_class(alias)
        logger.info('Persistence adapter selected: %r', _adapters[alias])
    return _adapters[alias]
