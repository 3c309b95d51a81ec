"""SQLAlchemy Core table declarations shared by repositories and migrations."""

from sqlalchemy import JSON, CheckConstraint, Column, DateTime, Index, MetaData, String, Table, Text, UniqueConstraint

metadata = MetaData()

app_user_table = Table(
    "app_user",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("email", Text, nullable=False),
    Column("display_name", Text, nullable=False),
    Column("password_hash", Text, nullable=True),
    Column("status", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("email", name="uq_app_user_email"),
    CheckConstraint("status IN ('active', 'invited', 'disabled')", name="ck_app_user_status"),
)

audit_log_table = Table(
    "audit_log",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("occurred_at", DateTime(timezone=True), nullable=False),
    Column("user_id", String(36), nullable=True),
    Column("action", Text, nullable=False),
    Column("resource", Text, nullable=False),
    Column("resource_id", Text, nullable=True),
    Column("event_metadata", JSON, nullable=True),
    Column("result", Text, nullable=False),
    Column("error_message", Text, nullable=True),
    Column("ip_address", Text, nullable=True),
    Column("user_agent", Text, nullable=True),
    CheckConstraint("result IN ('success', 'failure')", name="ck_audit_log_result"),
    Index("ix_audit_log_occurred_at", "occurred_at"),
)
