from __future__ import annotations

from typing import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from artgalerie import create_app, db
from artgalerie.config import TestConfig
from artgalerie.models import Artiste, Galerie, Tableau
from artgalerie.repositories import Repositories


@pytest.fixture
def app() -> Iterator[Flask]:
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture
def repos(app: Flask) -> Repositories:
    return app.extensions["repositories"]


@pytest.fixture
def artiste(app: Flask) -> Artiste:
    artiste = Artiste(nom="Claude Monet", adresse="Giverny")
    db.session.add(artiste)
    db.session.commit()
    return artiste


@pytest.fixture
def galerie(app: Flask) -> Galerie:
    galerie = Galerie(nom="Orsay", adresse="1 rue de la Légion d'Honneur, Paris")
    db.session.add(galerie)
    db.session.commit()
    return galerie


@pytest.fixture
def tableau(artiste: Artiste, galerie: Galerie) -> Tableau:
    tableau = Tableau(titre="Impression, soleil levant", support="Huile sur toile",
                      largeur=63, hauteur=48, artiste_id=artiste.id, galerie_id=galerie.id)
    db.session.add(tableau)
    db.session.commit()
    return tableau


def flashes(client: FlaskClient) -> list[tuple[str, str]]:
    with client.session_transaction() as session:
        return list(session.get("_flashes", []))
