"""Accès aux données du catalogue.

Chaque dépôt encapsule la session SQLAlchemy qu'on lui passe à la construction.
``save`` et ``delete`` ne lèvent pas d'exception pour une violation de
contrainte d'intégrité (nom de galerie en double, galerie qui a encore des
tableaux, artiste inexistant...) : ils renvoient un résultat ``Ok`` ou
``ConstraintViolation`` que l'appelant inspecte pour choisir son message.
Toute autre erreur de la base se propage.
"""

import logging
from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from artgalerie.models import Artiste, Galerie, Tableau

logger = logging.getLogger(__name__)

TModel = TypeVar("TModel")


@dataclass
class Ok(Generic[TModel]):
    entity: TModel


@dataclass
class ConstraintViolation(Generic[TModel]):
    entity: TModel
    detail: str = ""


Result = Union[Ok, ConstraintViolation]


class SQLAlchemyRepository(Generic[TModel]):
    model = None

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_all(self) -> List[TModel]:
        return self.session.query(self.model).order_by(self.model.id).all()

    def get(self, entity_id) -> Optional[TModel]:
        if entity_id is None:
            return None
        return self.session.get(self.model, entity_id)

    def save(self, instance: TModel) -> Result:
        label = repr(instance)
        self.session.add(instance)
        return self._commit(instance, label, "enregistrement")

    def delete(self, instance: TModel) -> Result:
        label = repr(instance)
        self.session.delete(instance)
        return self._commit(instance, label, "suppression")

    def _commit(self, instance: TModel, label: str, operation: str) -> Result:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning("%s refusé pour %s : %s", operation, label, e.orig)
            return ConstraintViolation(instance, str(e.orig))
        logger.info("%s de %s effectué", operation, label)
        return Ok(instance)


class GalerieRepository(SQLAlchemyRepository[Galerie]):
    model = Galerie


class TableauRepository(SQLAlchemyRepository[Tableau]):
    model = Tableau


class ArtisteRepository(SQLAlchemyRepository[Artiste]):
    model = Artiste


@dataclass
class Repositories:
    galeries: GalerieRepository
    tableaux: TableauRepository
    artistes: ArtisteRepository

    @classmethod
    def from_session(cls, session: Session) -> "Repositories":
        return cls(
            galeries=GalerieRepository(session),
            tableaux=TableauRepository(session),
            artistes=ArtisteRepository(session),
        )
