# daily_diet/services/metrics.py

from sqlalchemy import func

from daily_diet import db
from daily_diet.models.meal import Meal


def best_on_diet_sequence(flags) -> int:
    """
    Racha más larga de comidas seguidas dentro de dieta.
    `flags` ya viene ordenado (fecha descendente); un False reinicia la racha.
    """
    current = best = 0
    for on_diet in flags:
        current = current + 1 if on_diet else 0
        if current > best:
            best = current
    return best


def _count(user_id, on_diet: bool) -> int:
    return (
        db.session.query(func.count(Meal.id))
        .filter(Meal.user_id == user_id, Meal.is_on_diet == on_diet)
        .scalar()
    ) or 0


def compute_metrics(user_id) -> dict:
    """Métricas agregadas de las comidas de un usuario."""
    meals = (
        Meal.query
        .filter_by(user_id=user_id)
        .order_by(Meal.date.desc())
        .all()
    )
    return {
        "totalMeals": len(meals),
        "totalMealsOnDiet": _count(user_id, True),
        "totalMealsOffDiet": _count(user_id, False),
        "bestOnDietSequence": best_on_diet_sequence(m.is_on_diet for m in meals),
    }
