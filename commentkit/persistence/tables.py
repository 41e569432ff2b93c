"""SQLAlchemy table definitions for CommentKit.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

COMMENT_STATUS = Enum(
    "pending", "approved", "rejected", "spam", name="comment_status", create_type=False
)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("display_name", String(100), nullable=True),
    Column("is_superadmin", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# MAGIC LINKS TABLE (single-use login tokens)
# ============================================================================
magic_links_table = Table(
    "magic_links",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(255), nullable=False),
    Column("token", String(128), nullable=False, unique=True),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("used", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_magic_links_email", magic_links_table.c.email)

# ============================================================================
# SITES TABLE
# ============================================================================
sites_table = Table(
    "sites",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
    Column("domain", String(255), nullable=False, unique=True),
    Column("api_key", String(128), nullable=False, unique=True),
    Column(
        "owner_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("settings", JSONB, nullable=False, server_default="{}"),
    Column("verified", Boolean, nullable=False, server_default="false"),
    Column("verified_at", TIMESTAMP(timezone=True), nullable=True),
    Column("verification_token", String(128), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_sites_owner_id", sites_table.c.owner_id)

# ============================================================================
# PAGES TABLE (created lazily per site + page identifier)
# ============================================================================
pages_table = Table(
    "pages",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "site_id", Integer, ForeignKey("sites.id", ondelete="CASCADE"), nullable=False
    ),
    Column("slug", Text, nullable=False),
    Column("title", Text, nullable=True),
    Column("url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("site_id", "slug", name="uq_pages_site_slug"),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "site_id", Integer, ForeignKey("sites.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "page_id", Integer, ForeignKey("pages.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "parent_id",
        Integer,
        ForeignKey("comments.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("author_kind", String(10), nullable=False),  # 'user' or 'guest'
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True
    ),
    Column("author_name", String(100), nullable=False),  # Denormalized for display
    Column("author_email_hash", String(64), nullable=True),
    Column("content", Text, nullable=False),
    Column("status", COMMENT_STATUS, nullable=False, server_default="pending"),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(author_kind = 'user' AND user_id IS NOT NULL)"
        " OR (author_kind = 'guest' AND user_id IS NULL)",
        name="author_user_xor_guest",
    ),
    CheckConstraint("like_count >= 0", name="like_count_non_negative"),
)

Index("idx_comments_page_created", comments_table.c.page_id, comments_table.c.created_at)
Index("idx_comments_site_status", comments_table.c.site_id, comments_table.c.status)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# LIKES TABLE (pages and comments)
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "site_id", Integer, ForeignKey("sites.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "target_kind",
        Enum("page", "comment", name="like_target", create_type=False),
        nullable=False,
    ),
    Column("target_id", Integer, nullable=False),
    Column("subject", String(160), nullable=False),  # 'user:<id>' or 'anon:<fp>'
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "target_kind", "target_id", "subject", name="uq_likes_target_subject"
    ),
)

Index("idx_likes_target", likes_table.c.target_kind, likes_table.c.target_id)
Index("idx_likes_site_id", likes_table.c.site_id)

# ============================================================================
# MODERATION LOG TABLE
# ============================================================================
moderation_log_table = Table(
    "moderation_log",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "site_id", Integer, ForeignKey("sites.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "comment_id",
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("from_status", COMMENT_STATUS, nullable=False),
    Column("to_status", COMMENT_STATUS, nullable=False),
    Column(
        "actor_id", Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_moderation_log_site_created",
    moderation_log_table.c.site_id,
    moderation_log_table.c.created_at,
)
