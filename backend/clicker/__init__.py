from flask import Flask, request
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_cors import CORS
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException
import os
import click
from config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
migrate = Migrate()
MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'migrations')


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    bcrypt.init_app(flask_app)
    migrate.init_app(flask_app, db, directory=MIGRATIONS_DIR)
    CORS(flask_app, origins=flask_app.config.get('CORS_ORIGINS', []),
         methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS'])

    # Import and register blueprints here
    from clicker.main import main
    flask_app.register_blueprint(main)

    from clicker.api.users import users
    flask_app.register_blueprint(users, url_prefix='/user')

    from clicker.api.scores import scores
    flask_app.register_blueprint(scores, url_prefix='/score')

    _register_error_handlers(flask_app)

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from clicker.models import User, Score
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            # Seed users, each with a couple of scores
            for i, name in enumerate(['testuser1', 'testuser2', 'testuser3'], start=1):
                user = User(username=name, email=f'{name}@example.com')
                user.set_password('password')
                db.session.add(user)
                db.session.flush()
                for value in (i * 10, i * 25):
                    db.session.add(Score(user_id=user.id, score=value))

            db.session.commit()
            click.echo('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app


def _register_error_handlers(flask_app):
    from clicker.api import envelope
    from clicker.errors import ApiError, InternalError

    @flask_app.errorhandler(ApiError)
    def handle_api_error(err):
        return envelope(None, err.message, success=False, status=err.status_code)

    @flask_app.errorhandler(HTTPException)
    def handle_http_error(err):
        return envelope(None, err.description, success=False, status=err.code)

    @flask_app.errorhandler(Exception)
    def handle_unexpected_error(err):
        # Log the detail, send the client nothing but the generic message
        db.session.rollback()
        flask_app.logger.exception(f"[error] unhandled {request.method} {request.path}")
        internal = InternalError()
        return envelope(None, internal.message, success=False, status=internal.status_code)
