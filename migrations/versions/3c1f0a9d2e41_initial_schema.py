"""initial_schema

Create the schema for CaseHub invitation login:
- Users (limited flag, credential hash, session version, tracker login)
- User Emails (ordered, first is primary)
- Case Invitations (per-user invitation entries with unique access tokens)
- Access Invitations (append-only access dates per user and unit)
- Pending Invitations (read by the case tracker)

Revision ID: 3c1f0a9d2e41
Revises:
Create Date: 2026-10-19 09:12:44.310528

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2e41"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column(
            "is_limited", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column("credential_hash", sa.Text(), nullable=True),
        sa.Column(
            "session_version", sa.Integer(), server_default=sa.text("0"), nullable=False
        ),
        sa.Column("tracker_login", sa.String(length=255), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # USER EMAILS table
    # ========================================================================
    op.create_table(
        "user_emails",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=False),
        sa.Column(
            "verified", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "position"),
    )
    op.create_index(
        "idx_user_emails_address", "user_emails", ["address"], unique=True
    )

    # ========================================================================
    # CASE INVITATIONS table
    # ========================================================================
    op.create_table(
        "case_invitations",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("unit_id", sa.String(length=64), nullable=False),
        sa.Column("case_id", sa.String(length=64), nullable=False),
        sa.Column("access_token", sa.String(length=255), nullable=False),
        sa.Column("invited_by", sa.UUID(), nullable=False),
        sa.Column(
            "accessed_count", sa.Integer(), server_default=sa.text("0"), nullable=False
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "position"),
    )
    op.create_index(
        "idx_case_invitations_access_token",
        "case_invitations",
        ["access_token"],
        unique=True,
    )

    # ========================================================================
    # ACCESS INVITATIONS table
    # ========================================================================
    op.create_table(
        "access_invitations",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("unit_id", sa.String(length=64), nullable=False),
        sa.Column(
            "dates",
            postgresql.ARRAY(postgresql.TIMESTAMP(timezone=True)),
            server_default=sa.text("'{}'"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "unit_id", name="uq_access_invitation_user_unit"
        ),
    )

    # ========================================================================
    # PENDING INVITATIONS table
    # ========================================================================
    op.create_table(
        "pending_invitations",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("invitee_email", sa.String(length=255), nullable=False),
        sa.Column("invited_by", sa.UUID(), nullable=False),
        sa.Column("case_id", sa.String(length=64), nullable=False),
        sa.Column("unit_id", sa.String(length=64), nullable=False),
        sa.Column("role", sa.String(length=64), nullable=False),
        sa.Column(
            "is_occupant", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_pending_invitations_created_at",
        "pending_invitations",
        ["created_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(
        "idx_pending_invitations_created_at", table_name="pending_invitations"
    )
    op.drop_table("pending_invitations")
    op.drop_table("access_invitations")
    op.drop_index(
        "idx_case_invitations_access_token", table_name="case_invitations"
    )
    op.drop_table("case_invitations")
    op.drop_index("idx_user_emails_address", table_name="user_emails")
    op.drop_table("user_emails")
    op.drop_table("users")
