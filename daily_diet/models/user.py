# daily_diet/models/user.py

import uuid

from flask import current_app, jsonify
from flask_login import UserMixin
from daily_diet import db, login_manager


def _new_id():
    return str(uuid.uuid4())


class User(UserMixin, db.Model):
    __tablename__ = "users"

    id         = db.Column(db.String(36), primary_key=True, default=_new_id)
    name       = db.Column(db.String(150), nullable=False)
    email      = db.Column(db.String(150), unique=True, nullable=False)
    session_id = db.Column(db.String(36), nullable=False, index=True)

    # Relaciones
    meals = db.relationship("Meal", back_populates="user", cascade="all, delete-orphan")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "session_id": self.session_id,
        }

    def __repr__(self) -> str:
        return f"<User {self.id} {self.email}>"


# ---- Resolución de sesión para Flask-Login ----
@login_manager.request_loader
def load_user_from_session_cookie(request):
    """
    Resuelve la cookie de sesión al usuario dueño.
    Sin cookie o sin coincidencia -> anónimo (login_required responde 401).
    """
    session_id = request.cookies.get(current_app.config["SESSION_COOKIE_NAME_DIET"])
    if not session_id:
        return None
    return User.query.filter_by(session_id=session_id).first()


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify(error="Unauthorized."), 401
