# daily_diet/cli/seed.py
import uuid
from datetime import datetime, timedelta, timezone

import click
from flask.cli import AppGroup

from daily_diet import db
from daily_diet.models.meal import Meal
from daily_diet.models.user import User

seed_group = AppGroup("seed", help="Comandos de seed (datos iniciales)")

# ---- Semana de ejemplo: (días atrás, hora, nombre, descripción, dentro de dieta) ----
DEMO_MEALS = [
    (6, 8,  "Avena con fruta",     "Copos de avena, plátano y arándanos", True),
    (6, 14, "Ensalada de pollo",   "Pollo a la plancha, lechuga y tomate", True),
    (5, 21, "Pizza",               "Pizza cuatro quesos a domicilio",      False),
    (4, 8,  "Yogur griego",        "Con nueces y miel",                    True),
    (4, 14, "Lentejas",            "Lentejas estofadas con verduras",      True),
    (3, 21, "Salmón al horno",     "Con espárragos",                       True),
    (2, 17, "Bollería",            "Croissant y chocolate caliente",       False),
    (1, 14, "Arroz con verduras",  "Arroz integral salteado",              True),
    (0, 8,  "Tostada integral",    "Con aguacate y huevo",                 True),
]


def _epoch_ms(dt: datetime) -> int:
    return int(dt.timestamp() * 1000)


@seed_group.command("demo")
@click.option("--email", default="demo@daily.diet", show_default=True, help="Email del usuario demo")
@click.option("--name", default="Demo", show_default=True, help="Nombre del usuario demo")
def seed_demo(email, name):
    """
    Crea (si no existe) un usuario demo con una semana de comidas
    e imprime su token de sesión (valor de la cookie sessionId).
    """
    user = User.query.filter_by(email=email).first()
    if user:
        click.echo(f"'{email}' ya existe, no se añadieron comidas.")
        click.echo(f"sessionId={user.session_id}")
        return

    user = User(id=str(uuid.uuid4()), name=name, email=email, session_id=str(uuid.uuid4()))
    db.session.add(user)

    today = datetime.now(timezone.utc).replace(minute=0, second=0, microsecond=0)
    for days_ago, hour, meal_name, description, on_diet in DEMO_MEALS:
        when = (today - timedelta(days=days_ago)).replace(hour=hour)
        db.session.add(Meal(
            id=str(uuid.uuid4()),
            user_id=user.id,
            name=meal_name,
            description=description,
            is_on_diet=on_diet,
            date=_epoch_ms(when),
        ))

    db.session.commit()
    click.secho(f"Usuario demo creado con {len(DEMO_MEALS)} comidas.", fg="green")
    click.echo(f"sessionId={user.session_id}")
