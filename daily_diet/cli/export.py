# daily_diet/cli/export.py
import csv
import os
from datetime import datetime, timezone

import click
from flask.cli import AppGroup

from daily_diet.models.meal import Meal
from daily_diet.models.user import User
from daily_diet.services.metrics import compute_metrics

export_group = AppGroup("export", help="Comandos de exportación (CSV, etc.)")

MEAL_FIELDS = ["id", "name", "description", "is_on_diet", "date", "date_iso"]


def _iso_or_empty(epoch_ms):
    # Fechas fuera del rango de datetime (años > 9999) se dejan vacías
    try:
        return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc).isoformat()
    except (ValueError, OverflowError, OSError):
        return ""


def _get_user_or_fail(email):
    user = User.query.filter_by(email=email).first()
    if not user:
        raise click.ClickException(f"No existe ningún usuario con email '{email}'")
    return user


@export_group.command("meals")
@click.option("--email", required=True, help="Email del usuario a exportar")
@click.option("--to", "dest_path", default=None,
              help="Ruta destino del CSV (por defecto: instance/meals_export_YYYYMMDD.csv)")
def export_meals(email, dest_path):
    """
    Exporta las comidas de un usuario a CSV, de la más reciente a la más antigua.
    """
    user = _get_user_or_fail(email)

    if not dest_path:
        ts = datetime.now().strftime("%Y%m%d")
        dest_path = os.path.join("instance", f"meals_export_{ts}.csv")

    dest_dir = os.path.dirname(dest_path)
    if dest_dir:
        os.makedirs(dest_dir, exist_ok=True)

    rows = Meal.query.filter_by(user_id=user.id).order_by(Meal.date.desc()).all()
    with open(dest_path, "w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=MEAL_FIELDS)
        writer.writeheader()
        for m in rows:
            writer.writerow({
                "id": m.id,
                "name": m.name,
                "description": m.description,
                "is_on_diet": int(bool(m.is_on_diet)),
                "date": m.date,
                "date_iso": _iso_or_empty(m.date),
            })

    click.secho(f"Exportadas {len(rows)} comidas a: {dest_path}", fg="green")


@export_group.command("metrics")
@click.option("--email", required=True, help="Email del usuario")
def export_metrics(email):
    """Muestra las métricas de dieta de un usuario."""
    user = _get_user_or_fail(email)
    for key, value in compute_metrics(user.id).items():
        click.echo(f"{key}: {value}")
