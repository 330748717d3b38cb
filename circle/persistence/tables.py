"""SQLAlchemy table definitions for Circle.

These table definitions are used for classical ORM mapping.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROFILES TABLE (read-only here, owned by the identity feature)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("user_id", UUID, primary_key=True),
    Column("display_name", String(255), nullable=True),
    Column("avatar_ref", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# GROUP MEMBERS TABLE (read-only here, owned by the groups feature)
# ============================================================================
group_members_table = Table(
    "group_members",
    metadata,
    Column("group_id", UUID, nullable=False),
    Column("user_id", UUID, nullable=False),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("group_id", "user_id", name="pk_group_members"),
)

Index("idx_group_members_user_id", group_members_table.c.user_id)

# ============================================================================
# COMMENTS TABLE (posts and replies)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("author_id", UUID, nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "context_type",
        Enum("feed", "group", name="comment_context_type", create_type=False),
        nullable=False,
        server_default="feed",
    ),
    Column("context_id", UUID, nullable=True),  # Group ID for group comments
    Column(
        "attachment_kind",
        Enum(
            "image",
            "document",
            "link",
            "video",
            name="attachment_kind",
            create_type=False,
        ),
        nullable=True,
    ),
    Column("attachment_url", Text, nullable=True),
    Column("attachment_name", String(255), nullable=True),
    Column("attachment_embed_url", Text, nullable=True),
    Column(
        "status",
        Enum(
            "active", "approved", "reported", name="comment_status", create_type=False
        ),
        nullable=False,
        server_default="active",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("reported_by", UUID, nullable=True),
    Column("reported_at", TIMESTAMP(timezone=True), nullable=True),
    Column("report_reason", String(200), nullable=True),
    Column("report_details", Text, nullable=True),
    CheckConstraint(
        "(context_type = 'group') = (context_id IS NOT NULL)",
        name="context_id_matches_type",
    ),
    CheckConstraint(
        "(status = 'reported') = (reported_by IS NOT NULL AND reported_at IS NOT NULL)",
        name="report_metadata_matches_status",
    ),
    CheckConstraint(
        "(attachment_kind IS NULL) = (attachment_url IS NULL)",
        name="attachment_kind_matches_url",
    ),
)

Index(
    "idx_comments_context_created_at",
    comments_table.c.context_type,
    comments_table.c.context_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_status", comments_table.c.status)

# ============================================================================
# TOGGLES TABLE (administrative toggle-style fields)
# ============================================================================
toggles_table = Table(
    "toggles",
    metadata,
    Column("resource", String(100), nullable=False),
    Column("resource_id", String(100), nullable=False),
    Column("field", String(100), nullable=False),
    Column("value", JSONB, nullable=True),  # true/false, slot number or null
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("updated_by", UUID, nullable=True),
    PrimaryKeyConstraint("resource", "resource_id", "field", name="pk_toggles"),
)
