from artgalerie import db


def activer_cles_etrangeres(dbapi_connection, connection_record):
    """Écouteur "connect" du moteur SQLite de l'application (voir create_app)."""
    # SQLite n'applique les clés étrangères que si on le lui demande, connexion par connexion
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Artiste(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    nom = db.Column(db.String(100), nullable=False)
    adresse = db.Column(db.String(200), nullable=True)
    biographie = db.Column(db.Text, nullable=True)
    tableaux = db.relationship("Tableau", back_populates="artiste", lazy=True, passive_deletes="all")

    def __str__(self):
        return self.nom

    def __repr__(self):
        return f"Artiste('{self.nom}')"


class Galerie(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    nom = db.Column(db.String(100), unique=True, nullable=False)
    adresse = db.Column(db.String(200), nullable=True)
    # passive_deletes="all" : l'ORM ne met pas galerie_id à NULL, c'est la base qui refuse la suppression
    tableaux = db.relationship("Tableau", back_populates="galerie", lazy=True, passive_deletes="all")

    def __str__(self):
        return self.nom

    def __repr__(self):
        return f"Galerie('{self.nom}', '{self.adresse}')"


class Tableau(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    titre = db.Column(db.String(150), nullable=False)
    support = db.Column(db.String(50), nullable=True)
    largeur = db.Column(db.Integer, nullable=True)  # en cm
    hauteur = db.Column(db.Integer, nullable=True)
    artiste_id = db.Column(db.Integer, db.ForeignKey("artiste.id", ondelete="RESTRICT"), nullable=False)
    galerie_id = db.Column(db.Integer, db.ForeignKey("galerie.id", ondelete="RESTRICT"), nullable=True)
    artiste = db.relationship("Artiste", back_populates="tableaux")
    galerie = db.relationship("Galerie", back_populates="tableaux")

    def __str__(self):
        return self.titre

    def __repr__(self):
        return f"Tableau('{self.titre}', '{self.support}')"
