import click
from flask.cli import with_appcontext
from external.database import db
from market.libs.constants import Hall, ProductCategory, ServiceCategory
from market.users.models import User
from market.products.models import Product, ProductType
from market.services.models import Service
from market.demands.models import Demand
from market.listings.management.data import USERS, PRODUCTS, SERVICES, DEMANDS

ENUM_FIELDS = {
    "address_hall": Hall,
    "product_type": ProductType,
    "product_category": ProductCategory,
    "service_category": ServiceCategory,
}


def _build(model, data, owners, category_enum):
    fields = dict(data)
    owner = owners[fields.pop("owner")]
    for name, value in fields.items():
        if name == "category":
            fields[name] = category_enum(value)
        elif name in ENUM_FIELDS:
            fields[name] = ENUM_FIELDS[name](value)
    return model(owner=owner, **fields)


@click.command("seed-listings")
@click.option(
    "--force",
    is_flag=True,
    help="Delete existing listings before seeding",
)
@with_appcontext
def seed_listings(force):
    """Insert demo users, products, services and demands."""

    if force:
        click.echo("Deleting existing listings...")
        for model in (Product, Service, Demand):
            db.session.query(model).delete()
        db.session.commit()
    elif db.session.query(Product).count():
        click.echo("Listings already present, use --force to reseed.")
        return

    owners = {}
    for user_data in USERS:
        user = db.session.query(User).filter_by(email=user_data["email"]).first()
        if user is None:
            user = User(**user_data)
            db.session.add(user)
        owners[user_data["email"]] = user

    for data in PRODUCTS:
        db.session.add(_build(Product, data, owners, ProductCategory))
    for data in SERVICES:
        db.session.add(_build(Service, data, owners, ServiceCategory))
    for data in DEMANDS:
        db.session.add(_build(Demand, data, owners, None))

    try:
        db.session.commit()
        click.echo(
            f"Seeded {len(PRODUCTS)} products, {len(SERVICES)} services "
            f"and {len(DEMANDS)} demands."
        )
    except Exception as e:
        db.session.rollback()
        click.echo(f"Error seeding listings: {str(e)}")
        raise
