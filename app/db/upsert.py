"""
Insert-or-update helper.

Every table in this project declares the unique constraint its writes
conflict on.  This helper turns that declaration into a single
``INSERT ... ON CONFLICT`` statement so uniqueness and last-writer-wins are
enforced by the store, not by a read-then-write in Python.
"""

from collections.abc import Sequence

from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import Session, SQLModel

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def upsert_rows(session: Session, model: type[SQLModel], rows: Sequence[dict],
                conflict_columns: Sequence[str], update_columns: Sequence[str],
                overwrite: bool = True) -> int:
    """Upsert *rows* into *model*'s table without committing.

    Args:
        session: Active session; the statement joins its transaction
        model: Table model
        rows: Column/value dicts, at most one per conflict key
        conflict_columns: Columns of the unique constraint to conflict on
        update_columns: Columns overwritten when the key already exists
        overwrite: When False, existing rows are left untouched

    Returns:
        Number of rows inserted or updated; rows skipped by
        ``DO NOTHING`` are not counted
    """
    if not rows:
        return 0

    dialect = session.get_bind().dialect.name
    try:
        insert = _DIALECT_INSERTS[dialect]
    except KeyError:
        raise NotImplementedError(f"Upsert is not supported for dialect '{dialect}'") from None

    statement = insert(model.__table__).values(list(rows))
    if overwrite:
        statement = statement.on_conflict_do_update(
            index_elements=list(conflict_columns),
            set_={column: statement.excluded[column] for column in update_columns},
        )
    else:
        statement = statement.on_conflict_do_nothing(index_elements=list(conflict_columns))

    result = session.connection().execute(statement)
    # Drivers that cannot report a count give -1
    return result.rowcount if result.rowcount >= 0 else len(rows)
