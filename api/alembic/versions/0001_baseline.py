"""baseline schema for shelters, adopters, pets and admins

Revision ID: 0001_baseline
Revises:
Create Date: 2026-10-19

Five tables; enderecos follow their shelter on delete, pets keep the
adopter alive (RESTRICT) and lose their shelter link (SET NULL).
"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_baseline"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "abrigos",
        sa.Column("id_abrigo", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nome_abrigo", sa.String(100), nullable=False),
        sa.Column("email_abrigo", sa.String(150), nullable=False),
        sa.Column("celular_abrigo", sa.String(20), nullable=False),
        sa.Column("data_cadastro_abrigo", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("id_abrigo"),
        sa.UniqueConstraint("email_abrigo", name="uq_abrigos_email_abrigo"),
    )

    op.create_table(
        "enderecos",
        sa.Column("id_endereco", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("logradouro", sa.String(150), nullable=False),
        sa.Column("numero", sa.String(10), nullable=False),
        sa.Column("complemento", sa.String(100), nullable=True),
        sa.Column("bairro", sa.String(100), nullable=False),
        sa.Column("cidade", sa.String(100), nullable=False),
        sa.Column("estado", sa.String(2), nullable=False),
        sa.Column("cep", sa.String(9), nullable=False),
        sa.Column("abrigo_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id_endereco"),
        sa.ForeignKeyConstraint(
            ["abrigo_id"], ["abrigos.id_abrigo"], ondelete="CASCADE"
        ),
    )
    op.create_index("ix_enderecos_abrigo_id", "enderecos", ["abrigo_id"])

    op.create_table(
        "adotantes",
        sa.Column("id_adotante", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nome_adotante", sa.String(100), nullable=False),
        sa.Column("email_adotante", sa.String(150), nullable=False),
        sa.Column("celular_adotante", sa.String(20), nullable=False),
        sa.Column("senha_adotante", sa.String(255), nullable=False),
        sa.Column("data_cadastro_adotante", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("id_adotante"),
        sa.UniqueConstraint("email_adotante", name="uq_adotantes_email_adotante"),
    )

    op.create_table(
        "pets",
        sa.Column("id_pet", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nome_pet", sa.String(100), nullable=False),
        sa.Column("especie", sa.String(50), nullable=True),
        sa.Column("data_nascimento_pet", sa.Date(), nullable=False),
        sa.Column("adotante_id", sa.Integer(), nullable=True),
        sa.Column("abrigo_id", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id_pet"),
        sa.ForeignKeyConstraint(
            ["adotante_id"], ["adotantes.id_adotante"], ondelete="RESTRICT"
        ),
        sa.ForeignKeyConstraint(
            ["abrigo_id"], ["abrigos.id_abrigo"], ondelete="SET NULL"
        ),
    )
    op.create_index("ix_pets_adotante_id", "pets", ["adotante_id"])
    op.create_index("ix_pets_abrigo_id", "pets", ["abrigo_id"])

    op.create_table(
        "admins",
        sa.Column("id_admin", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nome_admin", sa.String(100), nullable=False),
        sa.Column("email_admin", sa.String(150), nullable=False),
        sa.Column("senha_admin", sa.String(255), nullable=False),
        sa.Column(
            "data_cadastro_admin",
            sa.Date(),
            server_default=sa.func.current_date(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id_admin"),
        sa.UniqueConstraint("email_admin", name="uq_admins_email_admin"),
    )


def downgrade() -> None:
    op.drop_table("admins")
    op.drop_index("ix_pets_abrigo_id", table_name="pets")
    op.drop_index("ix_pets_adotante_id", table_name="pets")
    op.drop_table("pets")
    op.drop_table("adotantes")
    op.drop_index("ix_enderecos_abrigo_id", table_name="enderecos")
    op.drop_table("enderecos")
    op.drop_table("abrigos")
