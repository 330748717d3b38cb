"""initial_schema

Create the schema for Circle:
- Profiles (display info, owned by the identity feature)
- Group members (owned by the groups feature)
- Comments (posts and one level of replies, with attachments and moderation)
- Toggles (administrative toggle-style fields)

Revision ID: 3c1f0a7d92e4
Revises:
Create Date: 2026-10-16 09:12:44.512930

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7d92e4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE comment_context_type AS ENUM ('feed', 'group');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE comment_status AS ENUM ('active', 'approved', 'reported');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE attachment_kind AS ENUM ('image', 'document', 'link', 'video');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # PROFILES table
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=True),
        sa.Column("avatar_ref", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("user_id"),
    )

    # ========================================================================
    # GROUP_MEMBERS table
    # ========================================================================
    op.create_table(
        "group_members",
        sa.Column("group_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "joined_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("group_id", "user_id", name="pk_group_members"),
    )
    op.create_index("idx_group_members_user_id", "group_members", ["user_id"])

    # ========================================================================
    # COMMENTS table (posts and replies)
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column(
            "context_type",
            postgresql.ENUM(
                "feed", "group", name="comment_context_type", create_type=False
            ),
            nullable=False,
            server_default="feed",
        ),
        sa.Column("context_id", sa.UUID(), nullable=True),
        sa.Column(
            "attachment_kind",
            postgresql.ENUM(
                "image",
                "document",
                "link",
                "video",
                name="attachment_kind",
                create_type=False,
            ),
            nullable=True,
        ),
        sa.Column("attachment_url", sa.Text(), nullable=True),
        sa.Column("attachment_name", sa.String(255), nullable=True),
        sa.Column("attachment_embed_url", sa.Text(), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM(
                "active",
                "approved",
                "reported",
                name="comment_status",
                create_type=False,
            ),
            nullable=False,
            server_default="active",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("reported_by", sa.UUID(), nullable=True),
        sa.Column("reported_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("report_reason", sa.String(200), nullable=True),
        sa.Column("report_details", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "(context_type = 'group') = (context_id IS NOT NULL)",
            name="context_id_matches_type",
        ),
        sa.CheckConstraint(
            "(status = 'reported') = "
            "(reported_by IS NOT NULL AND reported_at IS NOT NULL)",
            name="report_metadata_matches_status",
        ),
        sa.CheckConstraint(
            "(attachment_kind IS NULL) = (attachment_url IS NULL)",
            name="attachment_kind_matches_url",
        ),
    )
    op.create_index(
        "idx_comments_context_created_at",
        "comments",
        ["context_type", "context_id", "created_at"],
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_author_id", "comments", ["author_id"])
    op.create_index("idx_comments_status", "comments", ["status"])

    # ========================================================================
    # TOGGLES table
    # ========================================================================
    op.create_table(
        "toggles",
        sa.Column("resource", sa.String(100), nullable=False),
        sa.Column("resource_id", sa.String(100), nullable=False),
        sa.Column("field", sa.String(100), nullable=False),
        sa.Column("value", postgresql.JSONB(), nullable=True),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("updated_by", sa.UUID(), nullable=True),
        sa.PrimaryKeyConstraint(
            "resource", "resource_id", "field", name="pk_toggles"
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("toggles")
    op.drop_table("comments")
    op.drop_table("group_members")
    op.drop_table("profiles")

    op.execute("DROP TYPE IF EXISTS attachment_kind")
    op.execute("DROP TYPE IF EXISTS comment_status")
    op.execute("DROP TYPE IF EXISTS comment_context_type")
