"""create feedbacks

Revision ID: 3c7e9a1d2b40
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c7e9a1d2b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('feedbacks'):
        op.create_table(
            'feedbacks',
            sa.Column('id', sa.String(length=36), primary_key=True),
            sa.Column('feedback', sa.Text(), nullable=False),
            sa.Column('category', sa.String(length=32), nullable=False),
            sa.Column('is_reviewed', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('submission_time', sa.DateTime(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
        )
        op.create_index('ix_feedbacks_category', 'feedbacks', ['category'])
        op.create_index('ix_feedbacks_is_reviewed', 'feedbacks', ['is_reviewed'])
        op.create_index('ix_feedbacks_submission_time', 'feedbacks', ['submission_time'])


def downgrade():
    op.drop_index('ix_feedbacks_submission_time', table_name='feedbacks')
    op.drop_index('ix_feedbacks_is_reviewed', table_name='feedbacks')
    op.drop_index('ix_feedbacks_category', table_name='feedbacks')
    op.drop_table('feedbacks')
