"""Initial schema: users, policies, claims, payments, identifier_sequences

Revision ID: 0001
Revises:
Create Date: 2025-01-15 09:00:00
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("full_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("hashed_password", sa.Text(), nullable=False),
        sa.Column("phone_number", sa.String(20), nullable=False, server_default=""),
        sa.Column("role", sa.String(20), nullable=False, server_default="Customer"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "policies",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("policy_number", sa.String(50), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("coverage_amount", sa.Numeric(18, 2), nullable=False),
        sa.Column("premium_amount", sa.Numeric(18, 2), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="Active"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_policies_policy_number", "policies", ["policy_number"], unique=True)
    op.create_index("ix_policies_user_id", "policies", ["user_id"])
    op.create_index("ix_policies_status", "policies", ["status"])

    op.create_table(
        "claims",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("claim_number", sa.String(50), nullable=False),
        sa.Column("policy_id", sa.Integer(), sa.ForeignKey("policies.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("description", sa.String(1000), nullable=False),
        sa.Column("claim_amount", sa.Numeric(18, 2), nullable=False),
        sa.Column("approved_amount", sa.Numeric(18, 2), nullable=True),
        sa.Column("document_path", sa.String(500), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="Submitted"),
        sa.Column("incident_date", sa.Date(), nullable=False),
        sa.Column("submitted_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("reviewed_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("review_notes", sa.String(1000), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_claims_claim_number", "claims", ["claim_number"], unique=True)
    op.create_index("ix_claims_policy_id", "claims", ["policy_id"])
    op.create_index("ix_claims_user_id", "claims", ["user_id"])
    op.create_index("ix_claims_status", "claims", ["status"])

    op.create_table(
        "payments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("transaction_id", sa.String(50), nullable=False),
        sa.Column("policy_id", sa.Integer(), sa.ForeignKey("policies.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("amount", sa.Numeric(18, 2), nullable=False),
        sa.Column("method", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="Completed"),
        sa.Column("reference", sa.String(200), nullable=True),
        sa.Column("payment_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("processed_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_payments_transaction_id", "payments", ["transaction_id"], unique=True)
    op.create_index("ix_payments_policy_id", "payments", ["policy_id"])
    op.create_index("ix_payments_status", "payments", ["status"])

    op.create_table(
        "identifier_sequences",
        sa.Column("tag", sa.String(10), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("last_value", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("tag", "year"),
    )


def downgrade() -> None:
    op.drop_table("identifier_sequences")
    op.drop_table("payments")
    op.drop_table("claims")
    op.drop_table("policies")
    op.drop_table("users")
