import string
import random
from sqlalchemy import event, select


def generate_random_string(length=8):
    """Generate a random alphanumeric string"""
    chars = string.ascii_uppercase + string.digits
    return "".join(random.choice(chars) for _ in range(length))


def get_unique_id(connection, model_class, prefix="", length=8, max_attempts=100):
    """
    Generate a unique prefixed ID and ensure no collision for any model
    Args:
        connection: connection of the flush in progress
        model_class: SQLAlchemy model class to check against
        prefix: prefix prepended to the random part
        length: Length of generated ID
        max_attempts: Maximum attempts to try before raising error
    """
    table = model_class.__table__
    for _ in range(max_attempts):
        _id = f"{prefix}{generate_random_string(length)}"
        if connection.execute(select(table.c.id).where(table.c.id == _id)).first() is None:
            return _id
    raise ValueError(f"Failed to generate unique ID after {max_attempts} attempts")


class UniqueIdMixin:
    """Mixin to add unique string ID generation"""

    id_prefix = None  # Should be defined in subclass

    @classmethod
    def __declare_last__(cls):
        """Hook into SQLAlchemy after mappings are complete."""

        @event.listens_for(cls, "before_insert")
        def _set_unique_id(mapper, connection, target):
            if not target.id and target.id_prefix:
                target.id = get_unique_id(connection, cls, prefix=target.id_prefix)

    __abstract__ = True
