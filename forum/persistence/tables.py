"""SQLAlchemy table definitions for the forum.

Tables are used through SQLAlchemy Core; rows are converted to domain
models by the mappers module.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the auth system, read here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(40), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column("is_moderator", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_username", users_table.c.username, unique=True)

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("slug", String(100), nullable=False, unique=True),
    Column("subject", String(255), nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    # Not a foreign key: replies reference threads, so the cycle is kept soft
    Column("solution_reply_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "last_activity_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

# Rate limiting counts threads per author in a time range
Index("idx_threads_author_created", threads_table.c.author_id, threads_table.c.created_at)
Index("idx_threads_last_activity_at", threads_table.c.last_activity_at.desc())

# ============================================================================
# THREAD_TAGS TABLE (tags are managed externally)
# ============================================================================
thread_tags_table = Table(
    "thread_tags",
    metadata,
    Column(
        "thread_id", UUID, ForeignKey("threads.id", ondelete="CASCADE"), nullable=False
    ),
    Column("tag_id", UUID, nullable=False),
    UniqueConstraint("thread_id", "tag_id", name="uq_thread_tag"),
)

Index("idx_thread_tags_tag_id", thread_tags_table.c.tag_id)

# ============================================================================
# REPLIES TABLE
# ============================================================================
replies_table = Table(
    "replies",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("body", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "replyable_type",
        Enum("thread", name="replyable_type", create_type=False),
        nullable=False,
        server_default="thread",
    ),
    Column(
        "replyable_id",
        UUID,
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_replies_replyable", replies_table.c.replyable_type, replies_table.c.replyable_id)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "likeable_type",
        Enum("thread", "reply", name="likeable_type", create_type=False),
        nullable=False,
    ),
    Column("likeable_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "likeable_type", "likeable_id", name="unique_like"),
)

Index("idx_likes_likeable", likes_table.c.likeable_type, likes_table.c.likeable_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "recipient_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "kind",
        Enum("mention", "thread_deleted", name="notification_kind", create_type=False),
        nullable=False,
    ),
    Column("payload", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("read_at", TIMESTAMP(timezone=True), nullable=True),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
