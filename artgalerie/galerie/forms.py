from flask_wtf import FlaskForm
from wtforms import StringField, IntegerField, SelectField, SubmitField
from wtforms.validators import Optional
from wtforms.widgets import HiddenInput


def entier_ou_rien(value):
    """Convertit la valeur d'une liste déroulante en identifiant, '' devient None."""
    if value is None or value == '' or value == 'None':
        return None
    return int(value)


# Aucune règle métier ici : les seules vérifications sont les contraintes de la base
class GalerieForm(FlaskForm):
    id = IntegerField(widget=HiddenInput(), validators=[Optional()])
    nom = StringField('Nom')
    adresse = StringField('Adresse')
    submit = SubmitField('Enregistrer')

    def remplir(self, galerie):
        galerie.nom = self.nom.data
        galerie.adresse = self.adresse.data or None
        return galerie


class TableauForm(FlaskForm):
    id = IntegerField(widget=HiddenInput(), validators=[Optional()])
    titre = StringField('Titre')
    support = StringField('Support')
    largeur = IntegerField('Largeur (cm)', validators=[Optional()])
    hauteur = IntegerField('Hauteur (cm)', validators=[Optional()])
    artiste_id = SelectField('Artiste', coerce=entier_ou_rien, choices=[], validate_choice=False)
    galerie_id = SelectField('Exposé à la galerie', coerce=entier_ou_rien, choices=[], validate_choice=False)
    submit = SubmitField('Enregistrer')

    def charger_choix(self, artistes, galeries):
        self.artiste_id.choices = [('', 'Choisissez un artiste')] + [(a.id, a.nom) for a in artistes]
        self.galerie_id.choices = [('', 'Aucune')] + [(g.id, g.nom) for g in galeries]

    def remplir(self, tableau):
        tableau.titre = self.titre.data
        tableau.support = self.support.data or None
        tableau.largeur = self.largeur.data
        tableau.hauteur = self.hauteur.data
        tableau.artiste_id = self.artiste_id.data
        tableau.galerie_id = self.galerie_id.data
        return tableau
