from datetime import UTC, datetime

from sqlalchemy import DateTime

# Column type for every timestamp; values from utc_now() carry no tzinfo
NaiveDateTime = DateTime(timezone=False)


def utc_now() -> datetime:
    """Current UTC time without tzinfo.

    Timestamp columns are timezone-naive on both PostgreSQL and SQLite;
    values are UTC by convention.
    """
    return datetime.now(UTC).replace(tzinfo=None)
