import logging
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from sqlalchemy import event
from artgalerie.config import Config

db = SQLAlchemy()
migrate = Migrate()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    if not app.config.get('SECRET_KEY'):
        raise RuntimeError("SECRET_KEY n'est pas définie : les messages flash et le CSRF en dépendent")

    app.logger.setLevel(getattr(logging, app.config.get('LOG_LEVEL', 'INFO').upper(), logging.INFO))
    logging.getLogger('artgalerie').setLevel(app.logger.level)

    db.init_app(app)
    migrate.init_app(app, db)

    from artgalerie.models import activer_cles_etrangeres
    with app.app_context():
        if db.engine.dialect.name == 'sqlite':
            event.listen(db.engine, 'connect', activer_cles_etrangeres)

    from artgalerie.repositories import Repositories
    app.extensions['repositories'] = Repositories.from_session(db.session)

    from artgalerie.adminbp.routes import init_admin
    init_admin(app)

    from artgalerie.galerie.routes import galerie_bp
    from artgalerie.errors.handlers import errors
    app.register_blueprint(galerie_bp)
    app.register_blueprint(errors)

    app.logger.info("Application artgalerie démarrée (base : %s)", app.config['SQLALCHEMY_DATABASE_URI'])
    return app
