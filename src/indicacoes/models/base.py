from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum as SAEnum

from indicacoes.domain.enums import enum_values


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    """Creation timestamp shared by every table."""

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


def enum_column_type(enum_cls, name: str) -> SAEnum:
    """String column restricted to the values of ``enum_cls`` by a CHECK constraint."""
    return SAEnum(
        enum_cls,
        name=name,
        native_enum=False,
        create_constraint=True,
        length=32,
        values_callable=enum_values,
        validate_strings=True,
    )
