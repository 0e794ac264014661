def _equipo(client, **campos):
    payload = {
        "discipline_id": "futbol",
        "gender": "Femenino",
        "category_id": "fut-f-primera",
        "coach": "Sarina Wiegman",
    }
    payload.update(campos)
    return client.post("/equipos/", json=payload)


def test_listar_equipos_sembrados_con_plantel(client):
    data = client.get("/equipos/").json()
    assert [(e["coach"], e["category_name"], e["players_count"]) for e in data] == [
        ("Carlo Ancelotti", "Primera", 2),
        ("Marcelo Gallardo", "Reserva", 1),
        ("Steve Kerr", "Primera", 1),
    ]
    assert data[0]["discipline_name"] == "Fútbol"


def test_listar_equipos_filtrados(client):
    assert len(client.get("/equipos/", params={"disciplina_id": "basquet"}).json()) == 1
    assert client.get("/equipos/", params={"genero": "femenino"}).json() == []


def test_crear_equipo(client):
    response = _equipo(client, gender="femenino", physical_trainer="Ana Pérez")
    assert response.status_code == 201
    data = response.json()
    assert data["gender"] == "Femenino"
    assert data["category_name"] == "Primera"
    assert data["players_count"] == 1
    assert data["medical_staff"] == ""


def test_crear_equipo_categoria_de_otra_rama(client):
    response = _equipo(client, category_id="fut-m-primera")
    assert response.status_code == 400


def test_crear_equipo_duplicado(client):
    assert _equipo(client).status_code == 201
    assert _equipo(client, coach="Otra DT").status_code == 400


def test_crear_equipo_disciplina_inexistente(client):
    assert _equipo(client, discipline_id="rugby").status_code == 404


def test_cantidad_de_jugadores_sigue_al_plantel(client):
    equipo = client.get("/equipos/").json()[0]
    client.post("/jugadores/", json={
        "name": "Pablo Luna", "discipline": "fútbol ", "category": "PRIMERA", "gender": "Masculino",
    })
    client.post("/jugadores/", json={"name": "Sin Rama", "discipline": "Fútbol", "category": "Primera"})
    assert client.get(f"/equipos/{equipo['id']}").json()["players_count"] == 4


def test_equipo_sin_categoria_configurada_queda_sin_plantel(client):
    config = client.get("/club/").json()
    config["disciplines"][1]["branches"][0]["categories"] = []
    client.put("/club/", json=config)
    kerr = client.get("/equipos/", params={"disciplina_id": "basquet"}).json()[0]
    assert kerr["category_name"] is None
    assert kerr["players_count"] == 0


def test_actualizar_cuerpo_tecnico(client):
    equipo = client.get("/equipos/").json()[1]
    response = client.put(f"/equipos/{equipo['id']}", json={"medical_staff": "Dra. Quinn"})
    assert response.status_code == 200
    data = response.json()
    assert data["medical_staff"] == "Dra. Quinn"
    assert data["coach"] == "Marcelo Gallardo"
    assert data["players_count"] == 1


def test_eliminar_equipo(client):
    equipo = client.get("/equipos/").json()[0]
    assert client.delete(f"/equipos/{equipo['id']}").status_code == 204
    assert client.get(f"/equipos/{equipo['id']}").status_code == 404
    assert client.put(f"/equipos/{equipo['id']}", json={"coach": "X"}).status_code == 404
