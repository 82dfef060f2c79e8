"""create Documents table

Revision ID: 0001_create_documents
Revises:
Create Date: 2024-05-12 21:30:00

"""
from alembic import op
import sqlalchemy as sa


revision = "0001_create_documents"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "Documents",
        sa.Column("Id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("Title", sa.Text(), nullable=False),
        sa.Column("Content", sa.Text(), nullable=True),
        sa.Column("Status", sa.Text(), nullable=True),
        sa.Column("Author", sa.Text(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("Documents")
