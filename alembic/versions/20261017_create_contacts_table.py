"""create contacts table

Revision ID: create_contacts_table
Revises:
Create Date: 2026-10-17
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "create_contacts_table"
down_revision = None
branch_labels = None
depends_on = None

GENDER_VALUES = ("MASCULINO", "FEMININO", "NAO_BINARIO", "OUTRO")


def upgrade() -> None:
    op.create_table(
        "contacts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=False), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=False), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=32), nullable=False),
        sa.Column("gender", sa.Enum(*GENDER_VALUES, name="gender"), nullable=True),
        sa.Column("date_of_birth", sa.DateTime(timezone=False), nullable=True),
        sa.Column("profile_picture_url", sa.Text(), nullable=True),
        sa.Column("favorite", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_contacts_name", "contacts", ["name"], unique=False)
    op.create_index("ix_contacts_active", "contacts", ["active"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_contacts_active", table_name="contacts")
    op.drop_index("ix_contacts_name", table_name="contacts")
    op.drop_table("contacts")
    sa.Enum(name="gender").drop(op.get_bind(), checkfirst=True)
