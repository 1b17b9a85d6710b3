"""création du catalogue : artiste, galerie, tableau

Revision ID: 3f1c2a9d7b04
Revises:
Create Date: 2026-10-18 10:12:41.318204

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c2a9d7b04'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('artiste',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nom', sa.String(length=100), nullable=False),
        sa.Column('adresse', sa.String(length=200), nullable=True),
        sa.Column('biographie', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('galerie',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nom', sa.String(length=100), nullable=False),
        sa.Column('adresse', sa.String(length=200), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('nom')
    )
    # Une galerie ou un artiste référencé par un tableau ne peut pas être supprimé
    op.create_table('tableau',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('titre', sa.String(length=150), nullable=False),
        sa.Column('support', sa.String(length=50), nullable=True),
        sa.Column('largeur', sa.Integer(), nullable=True),
        sa.Column('hauteur', sa.Integer(), nullable=True),
        sa.Column('artiste_id', sa.Integer(), nullable=False),
        sa.Column('galerie_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['artiste_id'], ['artiste.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['galerie_id'], ['galerie.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade():
    op.drop_table('tableau')
    op.drop_table('galerie')
    op.drop_table('artiste')
