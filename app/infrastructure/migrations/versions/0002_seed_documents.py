"""seed Documents data

Revision ID: 0002_seed_documents
Revises: 0001_create_documents
Create Date: 2024-05-12 21:41:55

"""
from alembic import op
import sqlalchemy as sa


revision = "0002_seed_documents"
down_revision = "0001_create_documents"
branch_labels = None
depends_on = None

documents = sa.table(
    "Documents",
    sa.column("Id", sa.Integer),
    sa.column("Title", sa.String),
    sa.column("Author", sa.String),
)


def upgrade() -> None:
    op.bulk_insert(
        documents,
        [
            {"Id": n, "Title": f"Document {n}", "Author": f"Author of Document {n}"}
            for n in range(1, 6)
        ],
    )
    # Явные Id не двигают sequence в postgres, следующий INSERT должен получить 6
    if op.get_context().dialect.name == "postgresql":
        op.execute(
            """SELECT setval(pg_get_serial_sequence('"Documents"', 'Id'), (SELECT MAX("Id") FROM "Documents"))"""
        )


def downgrade() -> None:
    op.execute(documents.delete().where(documents.c.Id.in_([1, 2, 3, 4, 5])))
