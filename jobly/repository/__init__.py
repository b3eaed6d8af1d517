"""Repository layer: DB access helpers (SQLite).

Keep functions thin and focused, so services avoid SQL strings.
Every function takes the connection as its first argument.
"""


def first_row(rows):
    """First row of a fully drained result, or None.

    RETURNING statements are read with fetchall() so the write completes
    before the cursor is dropped.
    """
    return rows[0] if rows else None
