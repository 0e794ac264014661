def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_get_club_config_sembrada(client):
    response = client.get("/club/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "PLEGMA FC"
    assert [d["name"] for d in data["disciplines"]] == ["Fútbol", "Básquet", "Vóley"]


def test_put_club_config_reemplaza_arbol(client):
    payload = {
        "name": "Club Nuevo",
        "disciplines": [
            {"id": "hockey", "name": "Hockey", "branches": [
                {"gender": "Femenino", "categories": [{"id": "h1", "name": "Primera"}]},
            ]},
        ],
    }
    response = client.put("/club/", json=payload)
    assert response.status_code == 200
    assert client.get("/disciplinas/").json()[0]["name"] == "Hockey"


def test_put_club_config_rechaza_categorias_duplicadas(client):
    payload = {
        "name": "Club",
        "disciplines": [
            {"id": "f", "name": "Fútbol", "branches": [
                {"gender": "Masculino", "categories": [{"id": "c1", "name": "Primera"}]},
                {"gender": "Femenino", "categories": [{"id": "c1", "name": "Primera"}]},
            ]},
        ],
    }
    response = client.put("/club/", json=payload)
    assert response.status_code == 400


def test_disciplina_inexistente(client):
    assert client.get("/disciplinas/no-existe").status_code == 404


def test_disciplinas_solo_activas(client):
    config = client.get("/club/").json()
    config["disciplines"][2]["enabled"] = False
    client.put("/club/", json=config)
    nombres = [d["name"] for d in client.get("/disciplinas/", params={"solo_activas": True}).json()]
    assert nombres == ["Fútbol", "Básquet"]


def test_resumen_disciplina(client):
    data = client.get("/disciplinas/futbol/resumen").json()
    assert data["total_jugadores"] == 5
    assert data["lesionados"] == 1
    masculino, femenino = data["ramas"]
    assert masculino["jugadores"] == 3
    assert {c["name"]: c["jugadores"] for c in masculino["categorias"]} == {
        "Primera": 2, "Reserva": 1, "Sub-20": 0,
    }
    assert femenino["jugadores"] == 2


def test_subir_logo_sin_supabase_configurado(client, monkeypatch):
    from app.config import settings
    from app.services.supabase_storage import SupabaseStorage, get_storage
    from app.main import app

    monkeypatch.setattr(settings, "SUPABASE_URL", None)
    app.dependency_overrides[get_storage] = lambda: SupabaseStorage()
    response = client.post("/club/logo", files={"file": ("logo.png", b"png", "image/png")})
    assert response.status_code == 503


def test_put_club_config_conserva_logo_y_colores(client, db):
    from app.core.club import obtener_config

    config = obtener_config(db)
    config.logo_url = "https://cdn.plegma.test/club/logo.png"
    config.primary_color = "#ff0000"
    db.commit()

    payload = {"name": "PLEGMA FC", "disciplines": client.get("/club/").json()["disciplines"]}
    data = client.put("/club/", json=payload).json()
    assert data["logo_url"] == "https://cdn.plegma.test/club/logo.png"
    assert data["primary_color"] == "#ff0000"


def test_put_club_config_sin_disciplinas_no_borra_arbol(client):
    client.put("/club/", json={"name": "PLEGMA Club"})
    assert client.get("/club/").json()["name"] == "PLEGMA Club"
    assert len(client.get("/disciplinas/").json()) == 3
