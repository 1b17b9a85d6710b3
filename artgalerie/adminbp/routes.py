from markupsafe import Markup, escape
from flask_admin import Admin, AdminIndexView
from flask_admin.contrib.sqla import ModelView
from artgalerie import db
from artgalerie.models import Artiste, Galerie, Tableau


def nl2br(value):
    """Convertit les sauts de ligne en balises <br> pour HTML"""
    return Markup(str(escape(value)).replace('\n', '<br>')) if value else ''


class ArtisteModelView(ModelView):
    # Les artistes ne sont saisis que depuis l'administration
    column_list = ['id', 'nom', 'adresse', 'biographie']
    column_formatters = {'biographie': lambda view, context, model, name: nl2br(model.biographie)}
    column_searchable_list = ['nom']
    form_columns = ['nom', 'adresse', 'biographie']


class GalerieModelView(ModelView):
    column_list = ['id', 'nom', 'adresse']
    column_searchable_list = ['nom']
    form_columns = ['nom', 'adresse']


class TableauModelView(ModelView):
    column_list = ['id', 'titre', 'support', 'artiste', 'galerie']
    column_searchable_list = ['titre']
    column_filters = ['support']
    form_columns = ['titre', 'support', 'largeur', 'hauteur', 'artiste', 'galerie']


def init_admin(app):
    """Crée l'administration de l'application (une instance par application)."""
    admin = Admin(app, name=app.config.get('ADMIN_NAME'), index_view=AdminIndexView())
    # Endpoints préfixés : "galerie" est déjà le nom du blueprint de l'application
    admin.add_view(ArtisteModelView(Artiste, db.session, endpoint='admin_artiste', url='artiste'))
    admin.add_view(GalerieModelView(Galerie, db.session, endpoint='admin_galerie', url='galerie'))
    admin.add_view(TableauModelView(Tableau, db.session, endpoint='admin_tableau', url='tableau'))
    return admin
