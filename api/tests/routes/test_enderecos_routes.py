"""Integration tests for /enderecos (address rules and shelter cascade)."""

import pytest

pytestmark = pytest.mark.integration


@pytest.fixture
async def abrigo(client):
    response = await client.post(
        "/abrigos",
        json={
            "nome_abrigo": "Casa dos Gatos",
            "email_abrigo": "casa@gatos.org",
            "celular_abrigo": "(31) 99876-5432",
            "data_cadastro_abrigo": "2023-11-20",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


def _endereco(abrigo_id, **overrides):
    return {
        "logradouro": "Rua das Flores",
        "numero": "120",
        "bairro": "Centro",
        "cidade": "Belo Horizonte",
        "estado": "MG",
        "cep": "30110-000",
        "abrigo_id": abrigo_id,
        **overrides,
    }


class TestEnderecos:
    async def test_create(self, client, abrigo):
        response = await client.post("/enderecos", json=_endereco(abrigo["id_abrigo"]))

        assert response.status_code == 201
        assert response.json()["data"]["complemento"] is None

    async def test_invalid_cep_and_uf(self, client, abrigo):
        response = await client.post(
            "/enderecos",
            json=_endereco(abrigo["id_abrigo"], cep="30110", estado="Minas"),
        )

        assert response.status_code == 400
        assert len(response.json()["errors"]) == 2

    async def test_missing_shelter_is_400(self, client):
        response = await client.post("/enderecos", json=_endereco(None))

        assert response.status_code == 400

    async def test_removed_with_shelter(self, client, abrigo):
        created = await client.post("/enderecos", json=_endereco(abrigo["id_abrigo"]))
        endereco_id = created.json()["data"]["id_endereco"]

        await client.delete(f"/abrigos/{abrigo['id_abrigo']}")

        assert (await client.get(f"/enderecos/{endereco_id}")).status_code == 404
