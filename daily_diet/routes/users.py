# daily_diet/routes/users.py
import uuid

from flask import Blueprint, current_app, jsonify, request

from daily_diet import db
from daily_diet.models.user import User
from daily_diet.utils.validation import validate_user_payload

users_bp = Blueprint("users", __name__, url_prefix="/users")


def _session_cookie_name():
    return current_app.config["SESSION_COOKIE_NAME_DIET"]


@users_bp.route("/", methods=["GET"], strict_slashes=False)
def list_current_user():
    """Usuarios asociados a la cookie de sesión (0 o 1 en la práctica)."""
    session_id = request.cookies.get(_session_cookie_name())
    users = []
    if session_id:
        users = User.query.filter_by(session_id=session_id).all()
    return jsonify(users=[u.to_dict() for u in users]), 200


@users_bp.route("/", methods=["POST"], strict_slashes=False)
def register():
    """
    Registra un usuario.
    JSON: name, email
    Si la petición no trae cookie de sesión se genera una nueva y se envía
    en la respuesta (path "/", 7 días).
    """
    session_id = request.cookies.get(_session_cookie_name())
    new_session = not session_id
    if new_session:
        session_id = str(uuid.uuid4())

    def _respond(body, status):
        resp = current_app.make_response((body, status))
        if new_session:
            resp.set_cookie(
                _session_cookie_name(),
                session_id,
                path="/",
                max_age=current_app.config["SESSION_MAX_AGE"],
            )
        return resp

    data, errors = validate_user_payload(request.get_json(silent=True))
    if errors:
        return _respond(jsonify(error="ValidationError", fields=errors), 400)

    if User.query.filter_by(email=data["email"]).first():
        current_app.logger.info("[users] email ya registrado: %s", data["email"])
        return _respond(jsonify(message="User already exists!"), 400)

    user = User(
        id=str(uuid.uuid4()),
        name=data["name"],
        email=data["email"],
        session_id=session_id,
    )
    db.session.add(user)
    db.session.commit()
    current_app.logger.info("[users] registrado %s", user.id)

    return _respond("", 201)
