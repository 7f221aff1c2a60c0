import click
from flask.cli import with_appcontext
from external.database import db
from market.products.models import Product
from market.services.models import Service
from market.demands.models import Demand


@click.command("clear-listings")
@click.option("--confirm", is_flag=True, help="Confirm deletion without prompting")
@with_appcontext
def clear_listings(confirm):
    """Delete every product, service and demand."""

    if not confirm:
        if not click.confirm("Are you sure you want to delete ALL listings?"):
            click.echo("Operation cancelled.")
            return

    try:
        counts = {}
        for label, model in (
            ("products", Product),
            ("services", Service),
            ("demands", Demand),
        ):
            counts[label] = db.session.query(model).delete()
        db.session.commit()
        click.echo(
            "Deleted "
            + ", ".join(f"{count} {label}" for label, count in counts.items())
            + "."
        )
    except Exception as e:
        db.session.rollback()
        click.echo(f"Error deleting listings: {str(e)}")
        raise
