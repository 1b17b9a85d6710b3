from __future__ import annotations

from flask.testing import FlaskClient

from artgalerie import db
from artgalerie.models import Galerie, Tableau
from artgalerie.repositories import Repositories

from conftest import flashes


def noms(repos: Repositories) -> list[str]:
    db.session.expire_all()
    return [g.nom for g in repos.galeries.find_all()]


def test_index_redirects_to_the_list(client: FlaskClient) -> None:
    response = client.get("/galerie/")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/galerie/show")


def test_show_lists_every_galerie(client: FlaskClient, repos: Repositories) -> None:
    repos.galeries.save(Galerie(nom="Louvre"))
    repos.galeries.save(Galerie(nom="Orangerie"))

    html = client.get("/galerie/show").get_data(as_text=True)

    assert "Louvre" in html
    assert "Orangerie" in html


def test_add_renders_an_empty_form(client: FlaskClient) -> None:
    response = client.get("/galerie/add")

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert 'name="nom"' in html
    assert "Ajouter une galerie" in html


def test_add_with_id_prefills_the_form(client: FlaskClient, galerie: Galerie) -> None:
    html = client.get(f"/galerie/add?id={galerie.id}").get_data(as_text=True)

    assert 'value="Orsay"' in html
    assert "Modifier la galerie" in html


def test_add_with_unknown_id_is_not_found(client: FlaskClient) -> None:
    assert client.get("/galerie/add?id=999").status_code == 404


def test_save_new_galerie(client: FlaskClient, repos: Repositories) -> None:
    response = client.post("/galerie/save", data={"nom": "Louvre", "adresse": "Paris"})

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/galerie/show")
    assert flashes(client) == [("success", "La galerie 'Louvre' a été correctement enregistrée")]
    assert noms(repos) == ["Louvre"]


def test_save_duplicate_galerie_keeps_a_single_record(client: FlaskClient, repos: Repositories) -> None:
    client.post("/galerie/save", data={"nom": "Louvre"}, follow_redirects=True)

    client.post("/galerie/save", data={"nom": "Louvre"})

    assert flashes(client) == [("danger", "Erreur : La galerie 'Louvre' existe déjà")]
    assert noms(repos) == ["Louvre"]


def test_save_with_id_updates_the_existing_galerie(client: FlaskClient, repos: Repositories,
                                                    galerie: Galerie) -> None:
    client.post("/galerie/save", data={"id": str(galerie.id), "nom": "Musée d'Orsay", "adresse": ""})

    assert flashes(client) == [("success", "La galerie 'Musée d'Orsay' a été correctement enregistrée")]
    assert noms(repos) == ["Musée d'Orsay"]
    assert repos.galeries.get(galerie.id).adresse is None


def test_save_with_unknown_id_is_not_found(client: FlaskClient, repos: Repositories) -> None:
    response = client.post("/galerie/save", data={"id": "999", "nom": "Fantôme"})

    assert response.status_code == 404
    assert noms(repos) == []


def test_save_with_unbindable_id_redirects_to_the_form(client: FlaskClient, repos: Repositories) -> None:
    response = client.post("/galerie/save", data={"id": "abc", "nom": "Louvre"})

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/galerie/add")
    assert flashes(client) == [("danger", "Erreur : formulaire invalide")]
    assert noms(repos) == []


def test_delete_galerie_without_tableaux(client: FlaskClient, repos: Repositories, galerie: Galerie) -> None:
    response = client.get(f"/galerie/delete?id={galerie.id}")

    assert response.status_code == 302
    assert flashes(client) == [("success", "La galerie 'Orsay' a bien été supprimée")]
    assert noms(repos) == []


def test_delete_galerie_with_tableaux_is_refused(client: FlaskClient, repos: Repositories,
                                                 tableau: Tableau) -> None:
    client.get(f"/galerie/delete?id={tableau.galerie_id}")

    assert flashes(client) == [
        ("danger", "Erreur : Impossible de supprimer la galerie 'Orsay', il faut d'abord supprimer ses expositions")
    ]
    assert noms(repos) == ["Orsay"]


def test_delete_with_missing_invalid_or_unknown_id_is_not_found(client: FlaskClient, galerie: Galerie) -> None:
    assert client.get("/galerie/delete").status_code == 404
    assert client.get("/galerie/delete?id=abc").status_code == 404
    assert client.get("/galerie/delete?id=999").status_code == 404


def test_flash_message_is_shown_once(client: FlaskClient) -> None:
    response = client.post("/galerie/save", data={"nom": "Louvre"}, follow_redirects=True)
    assert "a été correctement enregistrée" in response.get_data(as_text=True)

    again = client.get("/galerie/show").get_data(as_text=True)
    assert "a été correctement enregistrée" not in again
    assert "Louvre" in again
