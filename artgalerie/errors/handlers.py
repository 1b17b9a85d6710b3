from flask import Blueprint, render_template, current_app
from artgalerie import db

errors = Blueprint('errors', __name__)


@errors.app_errorhandler(404)
def error_404(error):
    return render_template('errors/404.html'), 404


@errors.app_errorhandler(500)
def error_500(error):
    # La transaction en cours a pu échouer à mi-chemin
    db.session.rollback()
    current_app.logger.error("Erreur interne : %s", error)
    return render_template('errors/500.html'), 500
