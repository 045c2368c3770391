"""Initial schema - Indicações

Revision ID: 0000_initial
Revises:
Create Date: 2026-10-19

Tables:
- user: staff users (password or Discord login)
- session: login sessions
- leads: referral leads and their financial timestamps
- leads_comprovante: payment receipts as base64 data URIs
"""

from alembic import op
import sqlalchemy as sa

revision = '0000_initial'
down_revision = None
branch_labels = None
depends_on = None

CARGOS = ('Vendedor Interno', 'Vendedor Externo', 'Financeiro', 'Admin')
PIX_TYPES = ('CPF', 'CNPJ', 'Email', 'Telefone', 'Chave Aleatória')
LEAD_STATUSES = (
    'Pendente',
    'Sendo Atendido',
    'Finalizado',
    'Sem Sucesso',
    'Aguardando Pagamento',
    'Pago',
    'Cancelado',
)


def _in(column, values):
    quoted = ", ".join("'" + v.replace("'", "''") + "'" for v in values)
    return f"{column} IN ({quoted})"


def upgrade():
    # =========================================================================
    # USERS & SESSIONS
    # =========================================================================

    op.create_table(
        'user',
        sa.Column('id', sa.Text(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('last_name', sa.String(255), nullable=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=True),
        sa.Column('job', sa.String(32), server_default='Vendedor Externo', nullable=False),
        sa.Column('cpf', sa.String(11), nullable=True),
        sa.Column('telefone', sa.String(11), nullable=True),
        sa.Column('promo_code', sa.String(15), nullable=True),
        sa.Column('pix_type', sa.String(32), nullable=True),
        sa.Column('pix_code', sa.Text(), nullable=True),
        sa.Column('bonus_indicacao', sa.Integer(), server_default='0', nullable=False),
        sa.Column('cep', sa.String(8), nullable=True),
        sa.Column('rua', sa.String(256), nullable=True),
        sa.Column('numero_casa', sa.Integer(), nullable=True),
        sa.Column('complemento', sa.String(256), nullable=True),
        sa.Column('bairro', sa.String(256), nullable=True),
        sa.Column('cidade', sa.String(256), nullable=True),
        sa.Column('estado', sa.String(2), nullable=True),
        sa.Column('status', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.Column('provider', sa.String(50), nullable=True),
        sa.Column('provider_user_id', sa.String(100), nullable=True),
        sa.Column('avatar_url', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('cpf'),
        sa.UniqueConstraint('promo_code'),
        sa.UniqueConstraint('pix_code'),
        sa.CheckConstraint(_in('job', CARGOS), name='user_job'),
        sa.CheckConstraint(_in('pix_type', PIX_TYPES), name='user_pix_type'),
    )
    op.create_index('idx_user_email', 'user', ['email'])
    op.create_index('idx_user_provider', 'user', ['provider', 'provider_user_id'])

    op.create_table(
        'session',
        sa.Column('id', sa.Text(), nullable=False),
        sa.Column('user_id', sa.Text(), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
    )
    op.create_index('ix_session_user_id', 'session', ['user_id'])

    # =========================================================================
    # LEADS
    # =========================================================================

    op.create_table(
        'leads',
        sa.Column('id', sa.Text(), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('cpf_cnpj', sa.String(14), nullable=False),
        sa.Column('status', sa.String(32), server_default='Pendente', nullable=False),
        sa.Column('promo_code', sa.String(15), nullable=True),
        sa.Column('user_id_promo_code', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('attended_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('pago_por', sa.String(255), nullable=True),
        sa.Column('pago_em', sa.DateTime(timezone=True), nullable=True),
        sa.Column('aguardando_pagamento_em', sa.DateTime(timezone=True), nullable=True),
        sa.Column('cancelado_em', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('cpf_cnpj'),
        sa.ForeignKeyConstraint(['user_id_promo_code'], ['user.id']),
        sa.CheckConstraint(_in('status', LEAD_STATUSES), name='leads_status'),
    )
    op.create_index('idx_leads_status_created', 'leads', ['status', 'created_at'])

    op.create_table(
        'leads_comprovante',
        sa.Column('id', sa.Text(), nullable=False),
        sa.Column('leads_id', sa.Text(), nullable=False),
        sa.Column('comprovante', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['leads_id'], ['leads.id']),
    )
    op.create_index('ix_leads_comprovante_leads_id', 'leads_comprovante', ['leads_id'])


def downgrade():
    op.drop_table('leads_comprovante')
    op.drop_table('leads')
    op.drop_table('session')
    op.drop_table('user')
