from flask_login import UserMixin

from market.libs.models import BaseModel
from market.libs.helper import UniqueIdMixin
from external.database import db


class User(BaseModel, UserMixin, UniqueIdMixin):
    __tablename__ = "users"
    id_prefix = "USR_"

    id = db.Column(db.String(12), primary_key=True, default=None)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    name = db.Column(db.String(100))
    image = db.Column(db.String(500))
    mobile_number = db.Column(db.String(20))
    is_blocked = db.Column(db.Boolean, default=False, nullable=False)

    # Relationships
    products = db.relationship(
        "Product",
        back_populates="owner",
        lazy="dynamic",
        cascade="all, delete-orphan",
    )
    services = db.relationship(
        "Service",
        back_populates="owner",
        lazy="dynamic",
        cascade="all, delete-orphan",
    )
    demands = db.relationship(
        "Demand",
        back_populates="owner",
        lazy="dynamic",
        cascade="all, delete-orphan",
    )

    def get_id(self):
        # Sessions are keyed by email, the identity shared with the auth provider
        return self.email

    @property
    def is_active(self):
        return not self.is_blocked

    def __repr__(self):
        return f"<User {self.email}>"
