"""create users and meals

Revision ID: 3b1f0c2a9d41
Revises:
Create Date: 2026-10-19 10:12:31.204518
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "3b1f0c2a9d41"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("email", sa.String(length=150), nullable=False, unique=True),
        sa.Column("session_id", sa.String(length=36), nullable=False),
    )
    op.create_index("ix_users_session_id", "users", ["session_id"])

    op.create_table(
        "meals",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=36), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("is_on_diet", sa.Boolean(), nullable=False),
        # epoch en milisegundos
        sa.Column("date", sa.BigInteger(), nullable=False),
    )
    op.create_index("ix_meals_user_id", "meals", ["user_id"])


def downgrade():
    op.drop_index("ix_meals_user_id", table_name="meals")
    op.drop_table("meals")
    op.drop_index("ix_users_session_id", table_name="users")
    op.drop_table("users")
