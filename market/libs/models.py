from datetime import datetime
from external.database import db


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )


class BaseModel(db.Model, TimestampMixin):
    __abstract__ = True

    def to_dict(self):
        return {c.name: getattr(self, c.name) for c in self.__table__.columns}


class OwnedMixin:
    """Listings owned by a user; ownership is decided by the owner's email"""

    @property
    def owner_email(self):
        return self.owner.email if self.owner else None

    def is_owned_by(self, email):
        return bool(email) and self.owner_email == email
