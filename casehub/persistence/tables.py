"""SQLAlchemy table definitions for casehub.

These table definitions match the schema defined in Alembic migrations.
The embedded lists of the user aggregate (emails, case invitations) are
child tables ordered by `position`; position 0 is the primary entry.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=True),  # Empty until onboarding
    Column("is_limited", Boolean, nullable=False, server_default="false"),
    Column("credential_hash", Text, nullable=True),  # argon2, never plaintext
    Column("session_version", Integer, nullable=False, server_default="0"),
    Column("tracker_login", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# USER EMAILS TABLE
# ============================================================================
user_emails_table = Table(
    "user_emails",
    metadata,
    Column(
        "user_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, primary_key=True),
    Column("address", String(255), nullable=False),
    Column("verified", Boolean, nullable=False, server_default="false"),
)

Index("idx_user_emails_address", user_emails_table.c.address, unique=True)

# ============================================================================
# CASE INVITATIONS TABLE (embedded in users)
# ============================================================================
case_invitations_table = Table(
    "case_invitations",
    metadata,
    Column(
        "user_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, primary_key=True),
    Column("unit_id", String(64), nullable=False),
    Column("case_id", String(64), nullable=False),
    Column("access_token", String(255), nullable=False),
    # No foreign key: the inviter may be removed independently
    Column("invited_by", UUID, nullable=False),
    Column("accessed_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_case_invitations_access_token",
    case_invitations_table.c.access_token,
    unique=True,
)

# ============================================================================
# ACCESS INVITATIONS TABLE (invitation login audit)
# ============================================================================
access_invitations_table = Table(
    "access_invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("unit_id", String(64), nullable=False),
    Column(
        "dates",
        ARRAY(TIMESTAMP(timezone=True)),
        nullable=False,
        server_default="{}",
    ),
    UniqueConstraint("user_id", "unit_id", name="uq_access_invitation_user_unit"),
)

# ============================================================================
# PENDING INVITATIONS TABLE
# ============================================================================
pending_invitations_table = Table(
    "pending_invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("invitee_email", String(255), nullable=False),
    Column("invited_by", UUID, nullable=False),
    Column("case_id", String(64), nullable=False),
    Column("unit_id", String(64), nullable=False),
    Column("role", String(64), nullable=False),
    Column("is_occupant", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_pending_invitations_created_at", pending_invitations_table.c.created_at)
