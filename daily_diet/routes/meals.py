# daily_diet/routes/meals.py

import uuid

from flask import Blueprint, current_app, jsonify, request
from flask_login import login_required, current_user

from daily_diet import db
from daily_diet.models.meal import Meal
from daily_diet.services.metrics import compute_metrics
from daily_diet.utils.validation import parse_uuid, validate_meal_payload

meals_bp = Blueprint("meals", __name__, url_prefix="/meals")


# -----------------------------------------------------------------------------#
# Helpers
# -----------------------------------------------------------------------------#
def _invalid_id():
    return jsonify(error="ValidationError", fields={"id": "Invalid uuid"}), 400


def _not_found():
    return jsonify(error="Meal not found"), 404


def _exists(meal_id) -> bool:
    # Existencia global por id (sin filtrar por usuario)
    return db.session.get(Meal, meal_id) is not None


def _owned(meal_id):
    return Meal.query.filter_by(id=meal_id, user_id=current_user.id)


# -----------------------------------------------------------------------------#
# MEALS
# -----------------------------------------------------------------------------#
@meals_bp.route("/", methods=["POST"], strict_slashes=False)
@login_required
def create_meal():
    """
    Crea una comida.
    JSON: name, description, isOnDiet, date (epoch ms o ISO-8601)
    """
    data, errors = validate_meal_payload(request.get_json(silent=True))
    if errors:
        return jsonify(error="ValidationError", fields=errors), 400

    m = Meal(id=str(uuid.uuid4()), user_id=current_user.id, **data)
    db.session.add(m)
    db.session.commit()
    return "", 201


@meals_bp.route("/", methods=["GET"], strict_slashes=False)
@login_required
def list_meals():
    meals = Meal.query.filter_by(user_id=current_user.id).all()
    return jsonify([m.to_dict() for m in meals]), 200


@meals_bp.route("/metrics", methods=["GET"])
@login_required
def meals_metrics():
    return jsonify(metrics=compute_metrics(current_user.id)), 200


@meals_bp.route("/<meal_id>", methods=["GET"])
@login_required
def get_meal(meal_id):
    meal_id = parse_uuid(meal_id)
    if not meal_id:
        return _invalid_id()

    if not _exists(meal_id):
        return _not_found()

    meals = _owned(meal_id).all()
    return jsonify([m.to_dict() for m in meals]), 200


@meals_bp.route("/<meal_id>", methods=["PUT"])
@login_required
def update_meal(meal_id):
    """
    Reemplaza name, description, isOnDiet y date.
    Si la comida es de otro usuario no se toca nada y responde 200.
    """
    meal_id = parse_uuid(meal_id)
    if not meal_id:
        return _invalid_id()

    if not _exists(meal_id):
        return _not_found()

    data, errors = validate_meal_payload(request.get_json(silent=True))
    if errors:
        return jsonify(error="ValidationError", fields=errors), 400

    m = _owned(meal_id).first()
    if m:
        m.update_from_dict(data)
        db.session.commit()
    else:
        current_app.logger.warning("[meals] update sin efecto: %s no pertenece a %s", meal_id, current_user.id)
    return "", 200


@meals_bp.route("/<meal_id>", methods=["DELETE"])
@login_required
def delete_meal(meal_id):
    meal_id = parse_uuid(meal_id)
    if not meal_id:
        return _invalid_id()

    if not _exists(meal_id):
        return _not_found()

    deleted = _owned(meal_id).delete()
    db.session.commit()
    if not deleted:
        current_app.logger.warning("[meals] delete sin efecto: %s no pertenece a %s", meal_id, current_user.id)
    return "", 200
