from types import SimpleNamespace

import pytest

from app.core.plantel import (
    buscar_categoria,
    buscar_rama,
    coincide_nombre,
    normalizar,
    resolver_plantel,
)
from app.schemas.club import Disciplina


def _jugador(name, discipline="Fútbol", category="Primera", gender="Femenino", dni="", rating=None):
    return SimpleNamespace(
        id=name, name=name, discipline=discipline, category=category,
        gender=gender, dni=dni, overall_rating=rating,
    )


@pytest.fixture
def futbol():
    return Disciplina.model_validate({
        "id": "futbol",
        "name": "Fútbol",
        "branches": [
            {"gender": "Masculino", "categories": [
                {"id": "m-primera", "name": "Primera"},
                {"id": "m-sub20", "name": "Sub-20"},
            ]},
            {"gender": "Femenino", "categories": [
                {"id": "f-primera", "name": "Primera"},
                {"id": "f-reserva", "name": "Reserva"},
            ]},
        ],
    })


@pytest.fixture
def ana_y_bea():
    return [
        _jugador("Ana Lopez", category="Primera"),
        _jugador("Bea Ruiz", category="Reserva"),
    ]


@pytest.mark.parametrize("texto", [None, "", "   ", " Fútbol ", "SUB-20", "ÁrBoL\t", "İstanbul"])
def test_normalizar_idempotente(texto):
    assert normalizar(normalizar(texto)) == normalizar(texto)


def test_normalizar_recorta_y_pasa_a_minusculas():
    assert normalizar("  Fútbol  ") == "fútbol"
    assert normalizar(None) == ""


def test_buscar_rama_sin_distinguir_mayusculas(futbol):
    assert buscar_rama(futbol, "femenino").gender == "Femenino"
    assert buscar_rama(futbol, " MASCULINO ").gender == "Masculino"
    assert buscar_rama(futbol, "Mixto") is None
    assert buscar_rama(futbol, None) is None
    assert buscar_rama(None, "Femenino") is None


def test_buscar_categoria_solo_en_la_rama(futbol):
    femenino = buscar_rama(futbol, "Femenino")
    assert buscar_categoria(femenino, "f-reserva").name == "Reserva"
    # existe en la rama masculina, no en la femenina
    assert buscar_categoria(femenino, "m-sub20") is None
    assert buscar_categoria(femenino, None) is None
    assert buscar_categoria(None, "f-reserva") is None


def test_escenario_a_categoria_resuelta(futbol, ana_y_bea):
    resultado = resolver_plantel(ana_y_bea, futbol, "Femenino", "f-primera")
    assert [j.name for j in resultado] == ["Ana Lopez"]


def test_escenario_b_sin_categoria(futbol, ana_y_bea):
    resultado = resolver_plantel(ana_y_bea, futbol, "Femenino", "")
    assert [j.name for j in resultado] == ["Ana Lopez", "Bea Ruiz"]


def test_escenario_c_disciplina_normalizada(futbol):
    jugador = _jugador("Carla", discipline=" fútbol ")
    assert resolver_plantel([jugador], futbol, "Femenino") == [jugador]


def test_escenario_d_busqueda_por_nombre_o_dni(futbol):
    por_dni = _jugador("Dora Díaz", dni="DNI-123-X")
    por_nombre = _jugador("123 Club")
    ninguno = _jugador("Eva Gómez", dni="999")
    resultado = resolver_plantel([por_dni, por_nombre, ninguno], futbol, "Femenino", busqueda="123")
    assert resultado == [por_dni, por_nombre]


def test_busqueda_nombre_sin_mayusculas_y_dni_literal(futbol):
    jugador = _jugador("Ana Lopez", dni="AB-77")
    assert resolver_plantel([jugador], futbol, busqueda="  ana ") == [jugador]
    assert resolver_plantel([jugador], futbol, busqueda="AB-77") == [jugador]
    assert resolver_plantel([jugador], futbol, busqueda="ab-77") == []


def test_busqueda_en_blanco_no_filtra(futbol, ana_y_bea):
    assert resolver_plantel(ana_y_bea, futbol, busqueda="   ") == ana_y_bea


def test_otra_disciplina_siempre_excluida(futbol):
    jugador = _jugador("Ana Lopez", discipline="Básquet", dni="123")
    assert resolver_plantel([jugador], futbol) == []
    assert resolver_plantel([jugador], futbol, "Femenino", "f-primera", "Ana") == []


def test_sin_disciplina_resultado_vacio(ana_y_bea):
    assert resolver_plantel(ana_y_bea, None, "Femenino") == []


def test_lista_vacia(futbol):
    assert resolver_plantel([], futbol, "Femenino", "f-primera") == []


@pytest.mark.parametrize("categoria_id", [None, "", "no-existe", "m-primera"])
def test_categoria_no_resuelta_equivale_a_sin_filtro(futbol, ana_y_bea, categoria_id):
    sin_filtro = resolver_plantel(ana_y_bea, futbol, "Femenino")
    assert resolver_plantel(ana_y_bea, futbol, "Femenino", categoria_id) == sin_filtro


def test_rama_inexistente_no_filtra_por_categoria(ana_y_bea):
    voley = Disciplina.model_validate({"id": "v", "name": "Fútbol", "branches": []})
    assert resolver_plantel(ana_y_bea, voley, "Femenino", "f-primera") == ana_y_bea


def test_jugador_sin_genero_entra_en_ambas_ramas(futbol):
    sin_genero = _jugador("Sin Género", gender=None)
    en_blanco = _jugador("En Blanco", gender="  ")
    for genero in ("Masculino", "Femenino"):
        assert resolver_plantel([sin_genero, en_blanco], futbol, genero) == [sin_genero, en_blanco]


def test_genero_distinto_excluido(futbol):
    masculino = _jugador("Juan", gender="masculino ")
    assert resolver_plantel([masculino], futbol, "Femenino") == []
    assert resolver_plantel([masculino], futbol, "Masculino") == [masculino]


def test_mantiene_orden_y_no_modifica_entrada(futbol):
    jugadores = [_jugador(n) for n in ("Zoe", "Ana", "Mia", "Bea")]
    copia = list(jugadores)
    resultado = resolver_plantel(jugadores, futbol, "Femenino")
    assert resultado == copia
    assert resultado is not jugadores
    assert jugadores == copia


def test_orden_por_rating_estable_y_sin_rating_como_cero(futbol):
    a = _jugador("A", rating=70)
    b = _jugador("B", rating=None)
    c = _jugador("C", rating=85)
    d = _jugador("D", rating=70)
    e = _jugador("E", rating=0)
    jugadores = [a, b, c, d, e]
    resultado = resolver_plantel(jugadores, futbol, "Femenino", por_rating=True)
    assert [j.name for j in resultado] == ["C", "A", "D", "B", "E"]
    assert [j.name for j in jugadores] == ["A", "B", "C", "D", "E"]


def test_categorias_homonimas_se_resuelven_en_la_rama_elegida(futbol):
    # "Primera" existe en ambas ramas; el id masculino no resuelve en la rama femenina
    jugadores = [_jugador("Ana", category="Primera"), _jugador("Bea", category="Reserva")]
    resultado = resolver_plantel(jugadores, futbol, "Femenino", "m-primera")
    assert [j.name for j in resultado] == ["Ana", "Bea"]
    resultado = resolver_plantel(jugadores, futbol, "Femenino", "f-primera")
    assert [j.name for j in resultado] == ["Ana"]


def test_coincide_nombre_normalizado_y_comodines():
    assert coincide_nombre(" Fútbol ", "fútbol")
    assert not coincide_nombre("Básquet", "Fútbol")
    assert not coincide_nombre(None, "Fútbol")
    for comodin in ("Todas", "Todos", "todas ", "", None):
        assert coincide_nombre("Vóley", comodin)
