from httpx import AsyncClient

from qsvault import __version__


async def test_status(client: AsyncClient) -> None:
    response = await client.get("/api/system/status")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_openapi_describes_qsvault(client: AsyncClient) -> None:
    response = await client.get("/openapi.json")

    info = response.json()["info"]
    assert info == {"title": "qsvault", "version": __version__}
    assert "/api/issues" in response.json()["paths"]
