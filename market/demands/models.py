from external.database import db
from market.libs.models import BaseModel, OwnedMixin
from market.libs.helper import UniqueIdMixin
from market.libs.constants import ProductCategory, ServiceCategory


class Demand(BaseModel, OwnedMixin, UniqueIdMixin):
    """A request for a product or service category posted by a user"""

    __tablename__ = "demands"
    id_prefix = "DMD_"

    id = db.Column(db.String(12), primary_key=True, default=None)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    mobile_number = db.Column(db.String(20))
    product_category = db.Column(db.Enum(ProductCategory, name="product_category"))
    service_category = db.Column(db.Enum(ServiceCategory, name="service_category"))

    owner_id = db.Column(db.String(12), db.ForeignKey("users.id"), nullable=False)
    owner = db.relationship("User", back_populates="demands")

    def __repr__(self):
        return f"<Demand {self.id} {self.title!r}>"
