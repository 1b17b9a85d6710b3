from flask import Blueprint, render_template, request, redirect, url_for, flash, abort, current_app
from artgalerie.models import Galerie, Tableau
from artgalerie.repositories import Ok
from artgalerie.galerie.forms import GalerieForm, TableauForm

# Édition des galeries et des tableaux
galerie_bp = Blueprint('galerie', __name__, url_prefix='/galerie')

MESSAGE_FORMULAIRE_INVALIDE = "Erreur : formulaire invalide"


def get_repositories():
    return current_app.extensions['repositories']


def charger_ou_404(repository, entity_id):
    """Charge l'entité d'identifiant ``entity_id`` ou répond 404 (id absent, invalide ou inconnu)."""
    entity = repository.get(entity_id)
    if entity is None:
        current_app.logger.info("%s introuvable (id=%r)", repository.model.__name__, entity_id)
        abort(404)
    return entity


@galerie_bp.route('/')
def index():
    return redirect(url_for('galerie.show'))


@galerie_bp.route('/show')
def show():
    """Affiche toutes les galeries de la base."""
    return render_template('afficheGaleries.html', galeries=get_repositories().galeries.find_all())


@galerie_bp.route('/add')
def add():
    """Formulaire d'ajout d'une galerie, pré-rempli si un id est transmis."""
    galerie = Galerie()
    if 'id' in request.args:
        galerie = charger_ou_404(get_repositories().galeries, request.args.get('id', type=int))
    return render_template('formulaireGalerie.html', form=GalerieForm(obj=galerie), galerie=galerie)


@galerie_bp.route('/save', methods=['POST'])
def save():
    galeries = get_repositories().galeries
    form = GalerieForm()
    if not form.validate():
        current_app.logger.info("Formulaire galerie rejeté : %s", form.errors)
        flash(MESSAGE_FORMULAIRE_INVALIDE, 'danger')
        return redirect(url_for('galerie.add', id=form.id.data))

    galerie = charger_ou_404(galeries, form.id.data) if form.id.data is not None else Galerie()
    form.remplir(galerie)
    nom = galerie.nom

    # Les noms sont 'UNIQUE' : un doublon est refusé par la base
    if isinstance(galeries.save(galerie), Ok):
        flash(f"La galerie '{nom}' a été correctement enregistrée", 'success')
    else:
        flash(f"Erreur : La galerie '{nom}' existe déjà", 'danger')
    # POST-Redirect-GET
    return redirect(url_for('galerie.show'))


@galerie_bp.route('/delete')
def delete():
    galeries = get_repositories().galeries
    galerie = charger_ou_404(galeries, request.args.get('id', type=int))
    nom = galerie.nom

    if isinstance(galeries.delete(galerie), Ok):
        flash(f"La galerie '{nom}' a bien été supprimée", 'success')
    else:
        # La galerie expose encore des tableaux
        flash(f"Erreur : Impossible de supprimer la galerie '{nom}', il faut d'abord supprimer ses expositions", 'danger')
    return redirect(url_for('galerie.show'))


@galerie_bp.route('/showTableaux')
def show_tableaux():
    """Affiche tous les tableaux de la base."""
    return render_template('afficheTableaux.html', tableaux=get_repositories().tableaux.find_all())


@galerie_bp.route('/addTab')
def add_tab():
    repos = get_repositories()
    tableau = Tableau()
    if 'id' in request.args:
        tableau = charger_ou_404(repos.tableaux, request.args.get('id', type=int))
    artistes = repos.artistes.find_all()
    form = TableauForm(obj=tableau)
    form.charger_choix(artistes, repos.galeries.find_all())
    return render_template('formulaireTableau.html', form=form, tableau=tableau, artistes=artistes)


@galerie_bp.route('/saveTab', methods=['POST'])
def save_tab():
    tableaux = get_repositories().tableaux
    form = TableauForm()
    if not form.validate():
        current_app.logger.info("Formulaire tableau rejeté : %s", form.errors)
        flash(MESSAGE_FORMULAIRE_INVALIDE, 'danger')
        return redirect(url_for('galerie.add_tab', id=form.id.data))

    tableau = charger_ou_404(tableaux, form.id.data) if form.id.data is not None else Tableau()
    form.remplir(tableau)
    titre = tableau.titre

    if isinstance(tableaux.save(tableau), Ok):
        flash(f"Le tableau '{titre}' a été correctement enregistré", 'success')
    else:
        flash(f"Erreur : impossible d'enregistrer le tableau '{titre}'", 'danger')
    return redirect(url_for('galerie.show_tableaux'))


@galerie_bp.route('/deleteTab')
def delete_tab():
    tableaux = get_repositories().tableaux
    tableau = charger_ou_404(tableaux, request.args.get('id', type=int))
    titre = tableau.titre

    if isinstance(tableaux.delete(tableau), Ok):
        flash(f"Le tableau '{titre}' a bien été supprimé", 'success')
    else:
        flash(f"Erreur : impossible de supprimer le tableau '{titre}'", 'danger')
    return redirect(url_for('galerie.show_tableaux'))
