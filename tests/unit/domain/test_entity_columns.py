import pytest
from sqlalchemy import DateTime

from src.domain.entities import Client, Collection, Organization, User


@pytest.mark.parametrize(
    "entity,column",
    [
        (Organization, "created_at"),
        (Organization, "updated_at"),
        (Organization, "deleted_at"),
        (Client, "created_at"),
        (Client, "deleted_at"),
        (User, "updated_at"),
        (User, "last_login_at"),
        (Collection, "date_time"),
        (Collection, "deleted_at"),
    ],
)
def test_timestamps_are_naive_datetime_columns(entity, column):
    """Timestamps are stored as naive UTC, so the columns must not demand a timezone"""
    column_type = entity.__table__.c[column].type

    assert isinstance(column_type, DateTime)
    assert column_type.timezone is False


def test_lifecycle_columns_are_not_shared_between_tables():
    assert Organization.__table__.c.created_at is not Client.__table__.c.created_at
    assert Organization.__table__.c.created_at.table is Organization.__table__
