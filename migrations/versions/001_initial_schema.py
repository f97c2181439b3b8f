"""
001 — Initial schema: analysis_results table

Revision ID: 001
Create Date: 2026-10-16
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSON

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.execute("CREATE SCHEMA IF NOT EXISTS carefund")

    op.create_table(
        "analysis_results",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(100), nullable=False),

        sa.Column("profile_data", JSON, nullable=False),
        sa.Column("risk_result", JSON, nullable=False),
        sa.Column("financial_result", JSON, nullable=False),

        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),

        schema="carefund",
    )

    op.create_index("ix_analysis_results_user_id", "analysis_results", ["user_id"], schema="carefund")
    op.create_index("ix_analysis_results_created_at", "analysis_results", ["created_at"], schema="carefund")


def downgrade() -> None:
    op.drop_index("ix_analysis_results_created_at", table_name="analysis_results", schema="carefund")
    op.drop_index("ix_analysis_results_user_id", table_name="analysis_results", schema="carefund")
    op.drop_table("analysis_results", schema="carefund")
