# daily_diet/utils/validation.py

import re
import uuid
from datetime import datetime, timedelta, timezone

MAX_EPOCH_MS = 8_640_000_000_000_000
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Solo la forma 8-4-4-4-12 con guiones
UUID_RE = re.compile(r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\Z")


def parse_uuid(value):
    """Devuelve el UUID normalizado (str) o None si no es válido."""
    if not isinstance(value, str) or not UUID_RE.match(value):
        return None
    return str(uuid.UUID(value))


def to_epoch_ms(value):
    """
    Convierte `value` a epoch en milisegundos.
      - número JSON -> ya son milisegundos
      - string ISO-8601 (fecha o fecha-hora, con 'Z' u offset) -> UTC si no trae zona
    Lanza ValueError si no es convertible.
    """
    if isinstance(value, bool):
        raise ValueError("Fecha inválida")

    if isinstance(value, (int, float)):
        # NaN, infinito o fuera del rango representable
        if value != value or abs(value) > MAX_EPOCH_MS:
            raise ValueError("Fecha inválida")
        return int(value)

    if isinstance(value, str) and value.strip():
        dt = datetime.fromisoformat(value.strip())
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return (dt - EPOCH) // timedelta(milliseconds=1)

    raise ValueError("Fecha inválida")


def validate_user_payload(data):
    """Valida {name, email}. Devuelve (datos_limpios, errores)."""
    if not isinstance(data, dict):
        return None, {"body": "Se esperaba un objeto JSON"}

    errors = {}
    for field in ("name", "email"):
        if field not in data or data[field] is None:
            errors[field] = "Required"
        elif not isinstance(data[field], str):
            errors[field] = "Expected string"

    if errors:
        return None, errors
    return {"name": data["name"], "email": data["email"]}, {}


def validate_meal_payload(data):
    """
    Valida el cuerpo de creación/actualización de comidas:
    {name: str, description: str, isOnDiet: bool, date: epoch ms | ISO-8601}
    Devuelve (datos_limpios, errores) con claves ya en formato de columna.
    """
    if not isinstance(data, dict):
        return None, {"body": "Se esperaba un objeto JSON"}

    errors = {}

    for field in ("name", "description"):
        if field not in data or data[field] is None:
            errors[field] = "Required"
        elif not isinstance(data[field], str):
            errors[field] = "Expected string"

    on_diet = data.get("isOnDiet")
    if on_diet is None:
        errors["isOnDiet"] = "Required"
    elif not isinstance(on_diet, bool):
        errors["isOnDiet"] = "Expected boolean"

    date_ms = None
    if data.get("date") is None:
        errors["date"] = "Required"
    else:
        try:
            date_ms = to_epoch_ms(data["date"])
        except (ValueError, OverflowError, OSError):
            errors["date"] = "Invalid date"

    if errors:
        return None, errors

    return {
        "name": data["name"],
        "description": data["description"],
        "is_on_diet": on_diet,
        "date": date_ms,
    }, {}
