"""add_foreign_key_to_villa_table

Revision ID: 0002
Revises: 0001
Create Date: 2024-07-04 15:04:29.580000

Makes the owning villa's id the primary key of villa_numbers, with a
cascading foreign key to villas. A villa therefore owns at most one villa
number. Existing villa-number rows have no owner to assign, so the upgrade
only runs on an empty table; the downgrade restores the villa_no key but
the villa relationship is lost.

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0002'
down_revision = '0001'
branch_labels = None
depends_on = None


def upgrade() -> None:
    bind = op.get_bind()
    existing = bind.execute(sa.text("SELECT COUNT(*) FROM villa_numbers")).scalar()
    if existing:
        raise RuntimeError(
            f"villa_numbers holds {existing} row(s) with no owning villa; "
            "assign or remove them before upgrading"
        )

    dialect = bind.dialect.name if bind else None
    if dialect and dialect != 'sqlite':
        op.drop_constraint('pk_villa_numbers', 'villa_numbers', type_='primary')
        op.add_column('villa_numbers', sa.Column('villa_id', sa.Integer(), nullable=False))
        op.create_primary_key('pk_villa_numbers', 'villa_numbers', ['villa_id'])
        op.create_foreign_key(
            'fk_villa_numbers_villas_villa_id',
            'villa_numbers', 'villas',
            ['villa_id'], ['id'],
            ondelete='CASCADE'
        )
    else:
        # SQLite path: recreate table, it is known to be empty
        op.drop_table('villa_numbers')
        op.create_table('villa_numbers',
            sa.Column('villa_id', sa.Integer(), autoincrement=False, nullable=False),
            sa.Column('villa_no', sa.Integer(), nullable=False),
            sa.Column('special_details', sa.Text(), nullable=True),
            sa.Column('created_date', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.Column('updated_date', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.ForeignKeyConstraint(
                ['villa_id'], ['villas.id'],
                name='fk_villa_numbers_villas_villa_id',
                ondelete='CASCADE'
            ),
            sa.PrimaryKeyConstraint('villa_id', name='pk_villa_numbers')
        )
    op.create_index(op.f('ix_villa_numbers_villa_no'), 'villa_numbers', ['villa_no'], unique=True)


def downgrade() -> None:
    bind = op.get_bind()
    dialect = bind.dialect.name if bind else None
    op.drop_index(op.f('ix_villa_numbers_villa_no'), table_name='villa_numbers')
    if dialect and dialect != 'sqlite':
        op.drop_constraint('fk_villa_numbers_villas_villa_id', 'villa_numbers', type_='foreignkey')
        op.drop_constraint('pk_villa_numbers', 'villa_numbers', type_='primary')
        op.drop_column('villa_numbers', 'villa_id')
        op.create_primary_key('pk_villa_numbers', 'villa_numbers', ['villa_no'])
    else:
        # SQLite path: recreate table keyed by villa_no
        op.create_table('villa_numbers_old',
            sa.Column('villa_no', sa.Integer(), autoincrement=False, nullable=False),
            sa.Column('special_details', sa.Text(), nullable=True),
            sa.Column('created_date', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.Column('updated_date', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.PrimaryKeyConstraint('villa_no', name='pk_villa_numbers')
        )
        op.execute(
            """
            INSERT INTO villa_numbers_old (villa_no, special_details, created_date, updated_date)
            SELECT villa_no, special_details, created_date, updated_date
            FROM villa_numbers
            """
        )
        op.drop_table('villa_numbers')
        op.rename_table('villa_numbers_old', 'villa_numbers')
