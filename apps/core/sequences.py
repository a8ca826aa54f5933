"""
Atomic named counters.

Every counter is one row of the ``secuencias`` table. Allocation is an
increment-then-read inside a transaction:

    1. INSERT-OR-IGNORE the row with valor = 0 (first use of the key)
    2. UPDATE secuencias SET valor = valor + 1 WHERE clave = ...
    3. SELECT valor

The UPDATE holds the row lock on PostgreSQL and the database write lock on
SQLite (transactions begin IMMEDIATE), so two concurrent allocations for
the same key can never observe the same value. When called inside an outer
``transaction.atomic()`` the lock is held until that outer block commits,
and a rollback gives the number back.
"""
from django.db import DEFAULT_DB_ALIAS, transaction

from .exceptions import SequenceExhaustedError
from .persistence import get_adapter


def next_sequence_value(key, *, max_value=None, using=DEFAULT_DB_ALIAS):
    """
    Increment the counter ``key`` and return its new value.

    Args:
        key: Counter name, e.g. ``'ordenes'`` or ``'UDINING-20250101'``.
        max_value: Highest value the caller can represent. Allocating past
            it raises ``SequenceExhaustedError`` and the increment is
            rolled back.
        using: Database alias.

    Returns:
        int: The allocated value (1 for the first allocation).
    """
    db = get_adapter(using)
    with transaction.atomic(using=using):
        db.insert_ignore('secuencias', ['clave', 'valor'], [key, 0])
        db.run('UPDATE secuencias SET valor = valor + 1 WHERE clave = %s', [key])
        value = db.get('SELECT valor FROM secuencias WHERE clave = %s', [key])['valor']

        if max_value is not None and value > max_value:
            raise SequenceExhaustedError(
                f'Consecutivo agotado para {key}: máximo {max_value}'
            )
    return int(value)


def current_sequence_value(key, *, using=DEFAULT_DB_ALIAS):
    """Return the last allocated value for ``key`` (0 if never used)."""
    row = get_adapter(using).get('SELECT valor FROM secuencias WHERE clave = %s', [key])
    return int(row['valor']) if row else 0
