# daily_diet/__init__.py

import os
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

# Carga variables de entorno (.env)
load_dotenv()

# Extensiones compartidas
db = SQLAlchemy()
migrate = Migrate()
login_manager = LoginManager()

SESSION_COOKIE = "sessionId"
SESSION_MAX_AGE = 60 * 60 * 24 * 7  # 7 días


def _require_secret_key(secret) -> str:
    """Exige SECRET_KEY de mínimo 32 caracteres."""
    if not secret or len(secret) < 32:
        raise RuntimeError(
            "SECRET_KEY no configurado o demasiado corto. "
            "Añade una clave segura al .env, por ejemplo:\n"
            "  SECRET_KEY="
            "pZcN3mT0f3Qh7JtBv0r6m2kF9yV1wX8qZ4s3a6g9h2j5l8p1r0t2v4x6z8b0c2"
        )
    return secret


def _configure_logging(app: Flask) -> None:
    """Logging simple y consistente."""
    level = logging.DEBUG if app.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(level)


def create_app(test_config=None) -> Flask:
    """Factory principal de la aplicación."""
    app = Flask(__name__, instance_relative_config=True)

    os.makedirs(app.instance_path, exist_ok=True)

    # DB por defecto (SQLite en instance/daily_diet.db)
    db_path = os.path.join(app.instance_path, "daily_diet.db")
    default_db_uri = f"sqlite:///{db_path}"

    app.config.from_mapping(
        SECRET_KEY=os.getenv("SECRET_KEY", ""),
        SQLALCHEMY_DATABASE_URI=os.getenv("SQLALCHEMY_DATABASE_URI", default_db_uri),
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
        SESSION_COOKIE_NAME_DIET=SESSION_COOKIE,
        SESSION_MAX_AGE=SESSION_MAX_AGE,
        MAX_CONTENT_LENGTH=1 * 1024 * 1024,
    )
    # Overrides (tests) antes de inicializar extensiones
    if test_config:
        app.config.from_mapping(test_config)

    _require_secret_key(app.config.get("SECRET_KEY"))

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    _configure_logging(app)

    # Modelos (para que Flask-Migrate los detecte)
    from daily_diet.models.user import User  # noqa: F401
    from daily_diet.models.meal import Meal  # noqa: F401

    # ---------------------------------------------------------
    # BLUEPRINTS
    # ---------------------------------------------------------
    from daily_diet.routes.users import users_bp
    from daily_diet.routes.meals import meals_bp

    app.register_blueprint(users_bp)
    app.register_blueprint(meals_bp)

    from daily_diet.cli import register_cli
    register_cli(app)

    # Un único log por petición, para todas las rutas
    @app.before_request
    def _log_request():
        app.logger.info("[%s] %s", request.method, request.full_path.rstrip("?"))

    @app.get("/healthz")
    def _healthz():
        return {"status": "ok"}, 200

    # ---------------------------------------------------------
    # Errores en JSON
    # ---------------------------------------------------------
    @app.errorhandler(HTTPException)
    def _http_errors(err):
        return jsonify(error=err.name, message=err.description), err.code

    @app.errorhandler(Exception)
    def _unhandled(err):
        app.logger.exception("Error no controlado en %s %s", request.method, request.path)
        return jsonify(error="Internal Server Error", message="Unexpected server error"), 500

    return app
