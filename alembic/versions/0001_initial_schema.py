"""Create vocab, fixit and audit tables"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

status_type = postgresql.ENUM("pending", "in_progress", "completed", name="status_type", create_type=False)


def upgrade() -> None:
    status_type.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "vocab",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("learning_lang", sa.String(length=40), nullable=False),
        sa.Column("first_lang", sa.String(length=40), server_default=sa.text("''"), nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("alternatives", sa.String(length=255), server_default=sa.text("''"), nullable=False),
        sa.Column("skill", sa.String(length=100), server_default=sa.text("''"), nullable=False),
        sa.Column("infinitive", sa.String(length=40), server_default=sa.text("''"), nullable=False),
        sa.Column("pos", sa.String(length=40), server_default=sa.text("''"), nullable=False),
        sa.Column("hint", sa.String(length=255), server_default=sa.text("''"), nullable=False),
        sa.Column("num_learning_words", sa.Integer(), server_default=sa.text("1"), nullable=False),
        sa.Column("known_lang_code", sa.String(length=2), server_default=sa.text("'en'"), nullable=False),
        sa.Column("learning_lang_code", sa.String(length=2), server_default=sa.text("'es'"), nullable=False),
        sa.CheckConstraint("num_learning_words >= 1", name="ck_vocab_num_learning_words"),
    )
    op.create_unique_constraint("uq_vocab_learning_lang", "vocab", ["learning_lang"])

    op.create_table(
        "fixit",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("vocab_id", sa.Integer(), nullable=False),
        sa.Column("status", status_type, server_default=sa.text("'pending'"), nullable=False),
        sa.Column("field_name", sa.String(length=40), server_default=sa.text("''"), nullable=False),
        sa.Column("comments", sa.String(length=2000), server_default=sa.text("''"), nullable=False),
        sa.Column("created_by", sa.String(length=255), nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    )
    op.create_index("ix_fixit_vocab_id", "fixit", ["vocab_id"], unique=False)
    op.create_index("ix_fixit_created", "fixit", ["created"], unique=False)

    op.create_table(
        "audit",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("object_id", sa.Integer(), nullable=False),
        sa.Column("table_name", sa.String(length=40), nullable=False),
        sa.Column("diff", sa.Text(), server_default=sa.text("''"), nullable=False),
        sa.Column("before", sa.Text(), server_default=sa.text("''"), nullable=False),
        sa.Column("after", sa.Text(), server_default=sa.text("''"), nullable=False),
        sa.Column("comments", sa.String(length=1000), server_default=sa.text("''"), nullable=False),
        sa.Column("created_by", sa.String(length=255), nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    )
    op.create_index("ix_audit_object_id", "audit", ["object_id"], unique=False)
    op.create_index("ix_audit_table_name", "audit", ["table_name"], unique=False)
    op.create_index("ix_audit_created", "audit", ["created"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_audit_created", table_name="audit")
    op.drop_index("ix_audit_table_name", table_name="audit")
    op.drop_index("ix_audit_object_id", table_name="audit")
    op.drop_table("audit")

    op.drop_index("ix_fixit_created", table_name="fixit")
    op.drop_index("ix_fixit_vocab_id", table_name="fixit")
    op.drop_table("fixit")

    op.drop_constraint("uq_vocab_learning_lang", "vocab", type_="unique")
    op.drop_table("vocab")

    status_type.drop(op.get_bind(), checkfirst=True)
