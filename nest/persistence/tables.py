"""SQLAlchemy table definitions.

These table definitions mirror the externally managed schema and are used
with SQLAlchemy Core statements.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("title", String(300), nullable=False),
    Column("body", Text, nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "parent_id",
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("body", Text, nullable=False),
    Column("path", String, nullable=True),  # Assigned right after insert
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_path", comments_table.c.path)
