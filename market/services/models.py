from external.database import db
from market.libs.models import BaseModel, OwnedMixin
from market.libs.helper import UniqueIdMixin
from market.libs.constants import Hall, ServiceCategory
from market.products.models import JSONList


class Service(BaseModel, OwnedMixin, UniqueIdMixin):
    __tablename__ = "services"
    id_prefix = "SRV_"

    id = db.Column(db.String(12), primary_key=True, default=None)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    min_price = db.Column(db.Float)
    max_price = db.Column(db.Float)
    category = db.Column(
        db.Enum(ServiceCategory, name="service_category"),
        default=ServiceCategory.OTHER,
        nullable=False,
    )
    experience = db.Column(db.String(100))
    address_hall = db.Column(db.Enum(Hall, name="hall"))
    portfolio_url = db.Column(db.String(500))
    mobile_number = db.Column(db.String(20))
    images = db.Column(JSONList, default=list, nullable=False)

    owner_id = db.Column(db.String(12), db.ForeignKey("users.id"), nullable=False)
    owner = db.relationship("User", back_populates="services")

    @property
    def price_bounds(self):
        """(low, high) of the advertised range; a missing end mirrors the other"""
        low = self.min_price if self.min_price is not None else self.max_price
        high = self.max_price if self.max_price is not None else self.min_price
        return low, high

    def __repr__(self):
        return f"<Service {self.id} {self.title!r}>"
