"""
Tests for the /api/jabones endpoints.
"""

JABON = {
    "nombre": "Jabon X",
    "marca": "Marca 1",
    "fragancia": "Lavanda",
    "precio": 3.5,
    "stock": 10,
    "tipo": "barra",
}


def test_create_jabon_without_tienda(client):
    response = client.post("/api/jabones", json=JABON)
    assert response.status_code == 200
    created = response.json()
    assert created["id"] == 1
    assert created["tienda"] is None

    fetched = client.get(f"/api/jabones/{created['id']}").json()
    assert fetched == {**JABON, "id": 1, "tienda": None}


def test_create_jabon_ignores_tienda_in_body(client, tienda):
    body = {**JABON, "tienda": {"id": tienda.id}}
    created = client.post("/api/jabones", json=body).json()
    assert created["tienda"] is None


def test_negative_price_and_stock_are_accepted(client):
    created = client.post("/api/jabones", json={"nombre": "Raro", "precio": -1.0, "stock": -3}).json()
    assert created["precio"] == -1.0
    assert created["stock"] == -3


def test_invalid_body_is_422(client):
    response = client.post("/api/jabones", json={"precio": "caro"})
    assert response.status_code == 422


def test_get_missing_jabon_returns_null(client):
    response = client.get("/api/jabones/123")
    assert response.status_code == 200
    assert response.json() is None


def test_create_jabon_in_tienda(client):
    tienda = client.post("/api/tiendas", json={"nombre": "Tienda A", "direccion": "Calle 1"}).json()

    response = client.post(
        f"/api/jabones/tienda/{tienda['id']}",
        json={"nombre": "Jabon X", "precio": 3.5, "stock": 10},
    )
    assert response.status_code == 200
    created = response.json()
    assert created["tienda"]["id"] == tienda["id"]

    listing = client.get(f"/api/jabones/tienda/{tienda['id']}").json()
    assert [j["id"] for j in listing] == [created["id"]]
    assert "tienda" not in listing[0]

    fetched = client.get(f"/api/jabones/{created['id']}").json()
    assert fetched["tienda"]["id"] == tienda["id"]


def test_create_jabon_in_missing_tienda_is_404(client):
    response = client.post("/api/jabones/tienda/7", json=JABON)
    assert response.status_code == 404
    assert response.json()["detail"] == "Tienda no encontrada con id: 7"
    assert client.get("/api/jabones").json() == []


def test_list_jabones_of_missing_tienda_is_404(client):
    response = client.get("/api/jabones/tienda/7")
    assert response.status_code == 404


def test_list_all_jabones(client, tienda_con_jabones):
    client.post("/api/jabones", json=JABON)

    jabones = client.get("/api/jabones").json()
    assert len(jabones) == 3
    con_tienda = [j for j in jabones if j["tienda"] is not None]
    assert {j["tienda"]["id"] for j in con_tienda} == {tienda_con_jabones.id}


def test_update_jabon_overwrites_fields_and_keeps_tienda(client, tienda_con_jabones):
    jabon_id = tienda_con_jabones.jabones[0].id
    cambios = {"nombre": "Nuevo", "fragancia": "Coco", "precio": 9.9, "stock": 1}

    response = client.put(f"/api/jabones/{jabon_id}", json=cambios)
    assert response.status_code == 200
    updated = response.json()
    assert updated["nombre"] == "Nuevo"
    assert updated["precio"] == 9.9
    # Fields left out of the body are overwritten too
    assert updated["marca"] is None
    assert updated["tienda"]["id"] == tienda_con_jabones.id


def test_update_missing_jabon_returns_null(client):
    response = client.put("/api/jabones/55", json=JABON)
    assert response.status_code == 200
    assert response.json() is None
    assert client.get("/api/jabones").json() == []


def test_delete_jabon(client):
    created = client.post("/api/jabones", json=JABON).json()

    response = client.delete(f"/api/jabones/{created['id']}")
    assert response.status_code == 200
    assert client.get(f"/api/jabones/{created['id']}").json() is None


def test_delete_missing_jabon_succeeds(client):
    response = client.delete("/api/jabones/1000")
    assert response.status_code == 200


def test_nested_tienda_lists_its_jabones_without_back_reference(client):
    tienda = client.post("/api/tiendas", json={"nombre": "A", "direccion": "C"}).json()
    created = client.post(
        f"/api/jabones/tienda/{tienda['id']}",
        json={"nombre": "Jabon X", "precio": 3.5, "stock": 10},
    ).json()

    fetched = client.get(f"/api/jabones/{created['id']}").json()
    assert fetched["tienda"] == {
        "id": tienda["id"],
        "nombre": "A",
        "direccion": "C",
        "jabones": [{
            "id": created["id"],
            "nombre": "Jabon X",
            "marca": None,
            "fragancia": None,
            "precio": 3.5,
            "stock": 10,
            "tipo": None,
        }],
    }


def test_null_or_blank_numbers_are_stored_as_zero(client):
    response = client.post("/api/jabones", json={"nombre": "Sin precio", "precio": None, "stock": None})
    assert response.status_code == 200
    assert response.json()["precio"] == 0.0
    assert response.json()["stock"] == 0

    updated = client.put(f"/api/jabones/{response.json()['id']}", json={"precio": "", "stock": ""}).json()
    assert updated["precio"] == 0.0
    assert updated["stock"] == 0
