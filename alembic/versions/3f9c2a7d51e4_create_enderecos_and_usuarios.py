"""create enderecos and usuarios

Revision ID: 3f9c2a7d51e4
Revises:
Create Date: 2026-10-19 12:00:00.000000+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c2a7d51e4'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'enderecos',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('cep', sa.String(length=9), nullable=True),
        sa.Column('logradouro', sa.String(length=255), nullable=True),
        sa.Column('numero', sa.String(length=20), nullable=True),
        sa.Column('complemento', sa.String(length=255), nullable=True),
        sa.Column('bairro', sa.String(length=255), nullable=True),
        sa.Column('cidade', sa.String(length=255), nullable=True),
        sa.Column('estado', sa.String(length=2), nullable=True),
    )
    op.create_index('ix_enderecos_id', 'enderecos', ['id'])

    op.create_table(
        'usuarios',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('nome', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('cpf', sa.String(length=14), nullable=True),
        sa.Column('senha', sa.String(length=255), nullable=False),
        sa.Column('telefone', sa.String(length=20), nullable=True),
        sa.Column('descricao', sa.String(length=1000), nullable=True),
        sa.Column('foto', sa.String(length=500), nullable=True),
        sa.Column('tipo', sa.String(length=50), nullable=False),
        sa.Column('endereco', sa.Integer(), sa.ForeignKey('enderecos.id', ondelete='SET NULL'), nullable=True),
    )
    op.create_index('ix_usuarios_id', 'usuarios', ['id'])
    op.create_index('ix_usuarios_nome', 'usuarios', ['nome'])
    op.create_index('ix_usuarios_email', 'usuarios', ['email'], unique=True)
    op.create_index('ix_usuarios_cpf', 'usuarios', ['cpf'])
    op.create_index('ix_usuarios_tipo', 'usuarios', ['tipo'])


def downgrade() -> None:
    op.drop_table('usuarios')
    op.drop_table('enderecos')
