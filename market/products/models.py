from enum import Enum

from sqlalchemy.dialects.postgresql import JSONB

from external.database import db
from market.libs.models import BaseModel, OwnedMixin
from market.libs.helper import UniqueIdMixin
from market.libs.constants import Hall, ProductCategory

# Plain JSON on SQLite, JSONB on PostgreSQL
JSONList = db.JSON().with_variant(JSONB(), "postgresql")


class ProductType(Enum):
    NEW = "NEW"
    USED = "USED"
    RENT = "RENT"
    SERVICE = "SERVICE"


class ProductStatus(Enum):
    LISTED = "LISTED"
    SOLD = "SOLD"
    RENTED = "RENTED"


class Seasonality(Enum):
    NONE = "NONE"
    HALL_DAYS = "HALL_DAYS"
    PLACEMENTS = "PLACEMENTS"
    SEMESTER_END = "SEMESTER_END"
    FRESHERS = "FRESHERS"
    FESTIVE = "FESTIVE"


class Product(BaseModel, OwnedMixin, UniqueIdMixin):
    __tablename__ = "products"
    id_prefix = "PRD_"

    id = db.Column(
        db.String(12), primary_key=True, default=None
    )  # Will be auto-generated
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    price = db.Column(db.Float)
    original_price = db.Column(db.Float)
    product_type = db.Column(
        db.Enum(ProductType, name="product_type"),
        default=ProductType.USED,
        nullable=False,
    )
    status = db.Column(
        db.Enum(ProductStatus, name="product_status"),
        default=ProductStatus.LISTED,
        nullable=False,
    )
    condition = db.Column(db.Integer, default=3, nullable=False)
    age_in_months = db.Column(db.Float)
    address_hall = db.Column(db.Enum(Hall, name="hall"))
    mobile_number = db.Column(db.String(20))
    ecommerce_link = db.Column(db.String(500))
    invoice_image_url = db.Column(db.String(500))
    seasonality = db.Column(
        db.Enum(Seasonality, name="product_seasonality"),
        default=Seasonality.NONE,
        nullable=False,
    )
    category = db.Column(
        db.Enum(ProductCategory, name="product_category"),
        default=ProductCategory.OTHER,
        nullable=False,
    )
    images = db.Column(JSONList, default=list, nullable=False)

    owner_id = db.Column(db.String(12), db.ForeignKey("users.id"), nullable=False)
    owner = db.relationship("User", back_populates="products")

    def __repr__(self):
        return f"<Product {self.id} {self.title!r}>"
