"""create wishlist tables

Revision ID: 5c1e9a7d2b40
Revises:
Create Date: 2026-10-18 10:12:31.504117

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c1e9a7d2b40"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def user_fk(name: str, nullable: bool = False, ondelete: str = "CASCADE") -> sa.Column:
    return sa.Column(
        name, sa.String(length=36), sa.ForeignKey("users.id", ondelete=ondelete), nullable=nullable
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("username", sa.String(length=50), nullable=True),
        sa.Column("image", sa.String(), nullable=True),
        sa.Column("bio", sa.String(), nullable=True),
        *timestamps(),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "wishlists",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        user_fk("user_id"),
        sa.Column("privacy", sa.String(length=20), nullable=False, server_default="public"),
        sa.Column("share_link", sa.String(length=100), nullable=True),
        sa.Column("icon", sa.String(length=50), nullable=True),
        sa.Column("color", sa.String(length=20), nullable=True),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default=sa.false()),
        *timestamps(),
    )
    op.create_index(op.f("ix_wishlists_user_id"), "wishlists", ["user_id"], unique=False)
    op.create_index(op.f("ix_wishlists_share_link"), "wishlists", ["share_link"], unique=True)

    op.create_table(
        "wishlist_items",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "wishlist_id",
            sa.String(length=36),
            sa.ForeignKey("wishlists.id", ondelete="CASCADE"),
            nullable=False,
        ),
        user_fk("user_id"),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("url", sa.String(), nullable=False),
        sa.Column("affiliate_url", sa.String(), nullable=True),
        sa.Column("image", sa.String(), nullable=True),
        sa.Column("price", sa.String(length=50), nullable=True),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("priority", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("item_type", sa.String(length=50), nullable=True),
        sa.Column("category", sa.String(length=100), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=True),
        sa.Column("size", sa.String(length=50), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("price_history", sa.JSON(), nullable=True),
        user_fk("claimed_by", nullable=True, ondelete="SET NULL"),
        user_fk("purchased_by", nullable=True, ondelete="SET NULL"),
        sa.Column("claim_status", sa.String(length=20), nullable=False, server_default="none"),
        sa.Column("is_claimed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_purchased", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("purchase_proof", sa.String(), nullable=True),
        sa.Column("purchase_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("tracking_number", sa.String(length=255), nullable=True),
        sa.Column("purchase_notes", sa.String(), nullable=True),
        sa.Column("purchase_amount", sa.String(length=50), nullable=True),
        sa.Column("is_anonymous", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("proof_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("proof_rejected", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("proof_verified_at", sa.DateTime(timezone=True), nullable=True),
        user_fk("proof_verified_by", nullable=True, ondelete="SET NULL"),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        *timestamps(),
    )
    op.create_index(
        op.f("ix_wishlist_items_wishlist_id"), "wishlist_items", ["wishlist_id"], unique=False
    )
    op.create_index(op.f("ix_wishlist_items_user_id"), "wishlist_items", ["user_id"], unique=False)
    op.create_index(
        op.f("ix_wishlist_items_claim_status"), "wishlist_items", ["claim_status"], unique=False
    )

    op.create_table(
        "price_alerts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "item_id",
            sa.String(length=36),
            sa.ForeignKey("wishlist_items.id", ondelete="CASCADE"),
            nullable=False,
        ),
        user_fk("user_id"),
        sa.Column("target_price", sa.String(length=50), nullable=True),
        sa.Column("percent_drop", sa.Integer(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("last_notified_at", sa.DateTime(timezone=True), nullable=True),
        *timestamps(),
    )
    op.create_index(op.f("ix_price_alerts_item_id"), "price_alerts", ["item_id"], unique=False)
    op.create_index(op.f("ix_price_alerts_user_id"), "price_alerts", ["user_id"], unique=False)

    op.create_table(
        "friendships",
        sa.Column("id", sa.String(length=36), primary_key=True),
        user_fk("user_id"),
        user_fk("friend_id"),
        sa.Column(
            "relationship_type", sa.String(length=20), nullable=False, server_default="friend"
        ),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="pending"),
        *timestamps(),
        sa.UniqueConstraint("user_id", "friend_id", name="uq_friendship_pair"),
    )
    op.create_index(op.f("ix_friendships_user_id"), "friendships", ["user_id"], unique=False)
    op.create_index(op.f("ix_friendships_friend_id"), "friendships", ["friend_id"], unique=False)

    op.create_table(
        "comments",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "item_id",
            sa.String(length=36),
            sa.ForeignKey("wishlist_items.id", ondelete="CASCADE"),
            nullable=False,
        ),
        user_fk("user_id"),
        sa.Column("content", sa.String(), nullable=False),
        sa.Column(
            "parent_id",
            sa.String(length=36),
            sa.ForeignKey("comments.id", ondelete="CASCADE"),
            nullable=True,
        ),
        *timestamps(),
    )
    op.create_index(op.f("ix_comments_item_id"), "comments", ["item_id"], unique=False)
    op.create_index(op.f("ix_comments_user_id"), "comments", ["user_id"], unique=False)

    op.create_table(
        "reactions",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "item_id",
            sa.String(length=36),
            sa.ForeignKey("wishlist_items.id", ondelete="CASCADE"),
            nullable=False,
        ),
        user_fk("user_id"),
        sa.Column("type", sa.String(length=30), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("user_id", "item_id", "type", name="uq_reaction_user_item_type"),
    )
    op.create_index(op.f("ix_reactions_item_id"), "reactions", ["item_id"], unique=False)
    op.create_index(op.f("ix_reactions_user_id"), "reactions", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_table("reactions")
    op.drop_table("comments")
    op.drop_table("friendships")
    op.drop_table("price_alerts")
    op.drop_table("wishlist_items")
    op.drop_table("wishlists")
    op.drop_table("users")
