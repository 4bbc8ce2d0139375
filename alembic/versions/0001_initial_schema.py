"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2024-07-04 14:11:27.200000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None


SEED_VILLAS = [
    {"id": 1, "name": "Royal Villa", "rate": 200, "sqft": 550, "capacity": 4,
     "details": "Garden-facing villa with a private terrace.",
     "image_url": "/images/villa3.jpg", "amenity": ""},
    {"id": 2, "name": "Premium Pool Villa", "rate": 300, "sqft": 550, "capacity": 4,
     "details": "Villa with a heated plunge pool and outdoor shower.",
     "image_url": "/images/villa1.jpg", "amenity": ""},
    {"id": 3, "name": "Luxury Pool Villa", "rate": 400, "sqft": 750, "capacity": 4,
     "details": "Two-level villa with an infinity pool and sea view.",
     "image_url": "/images/villa4.jpg", "amenity": ""},
    {"id": 4, "name": "Diamond Villa", "rate": 550, "sqft": 900, "capacity": 4,
     "details": "Corner villa with a wraparound deck and lounge.",
     "image_url": "/images/villa5.jpg", "amenity": ""},
    {"id": 5, "name": "Diamond Pool Villa", "rate": 600, "sqft": 1100, "capacity": 4,
     "details": "The largest villa, with a private pool and butler service.",
     "image_url": "/images/villa2.jpg", "amenity": ""},
]


def upgrade() -> None:
    villas = op.create_table('villas',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=30), nullable=False),
        sa.Column('details', sa.Text(), nullable=True),
        sa.Column('rate', sa.Float(), nullable=False),
        sa.Column('sqft', sa.Integer(), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('image_url', sa.String(length=255), nullable=True),
        sa.Column('amenity', sa.String(length=255), nullable=True),
        sa.Column('created_date', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_date', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_villas'),
        sa.UniqueConstraint('name', name='uq_villas_name')
    )
    op.create_index(op.f('ix_villas_id'), 'villas', ['id'], unique=False)

    # Unit numbers are assigned by staff, not generated
    op.create_table('villa_numbers',
        sa.Column('villa_no', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('special_details', sa.Text(), nullable=True),
        sa.Column('created_date', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_date', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('villa_no', name='pk_villa_numbers')
    )

    op.create_table('local_users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.Enum('admin', 'customer', name='user_role', native_enum=False), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_local_users')
    )
    op.create_index(op.f('ix_local_users_id'), 'local_users', ['id'], unique=False)
    op.create_index(op.f('ix_local_users_username'), 'local_users', ['username'], unique=True)

    op.bulk_insert(villas, SEED_VILLAS)
    if op.get_bind().dialect.name == 'postgresql':
        # Seed rows carry explicit ids; move the sequence past them
        op.execute("SELECT setval(pg_get_serial_sequence('villas', 'id'), (SELECT MAX(id) FROM villas))")


def downgrade() -> None:
    op.drop_index(op.f('ix_local_users_username'), table_name='local_users')
    op.drop_index(op.f('ix_local_users_id'), table_name='local_users')
    op.drop_table('local_users')
    op.drop_table('villa_numbers')
    op.drop_index(op.f('ix_villas_id'), table_name='villas')
    op.drop_table('villas')
