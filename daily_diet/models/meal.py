# daily_diet/models/meal.py

import uuid

from daily_diet import db


class Meal(db.Model):
    __tablename__ = "meals"

    id          = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id     = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name        = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    is_on_diet  = db.Column(db.Boolean, nullable=False)

    # Epoch en milisegundos
    date = db.Column(db.BigInteger, nullable=False)

    user = db.relationship("User", back_populates="meals")

    # ---- API helpers ----
    def update_from_dict(self, data: dict):
        """Reemplazo completo de los campos editables (user_id nunca cambia)."""
        for attr in ("name", "description", "is_on_diet", "date"):
            setattr(self, attr, data[attr])

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "is_on_diet": bool(self.is_on_diet),
            "date": self.date,
            "user_id": self.user_id,
        }

    def __repr__(self) -> str:
        return f"<Meal {self.id} diet={self.is_on_diet} date={self.date}>"
