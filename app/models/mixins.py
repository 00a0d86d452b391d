from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import declared_attr


class StatusPriorityMixin:
    """status_id / priority_id columns: delete restricted, id updates cascade."""

    @declared_attr
    def status_id(cls):
        return Column(
            Integer,
            ForeignKey("travel_statuses.id", ondelete="RESTRICT", onupdate="CASCADE"),
            nullable=False,
            index=True,
        )

    @declared_attr
    def priority_id(cls):
        return Column(
            Integer,
            ForeignKey("travel_priority_levels.id", ondelete="RESTRICT", onupdate="CASCADE"),
            nullable=False,
            index=True,
        )


class OwnerMixin:
    """Optional owner; deleting the user keeps the row and clears the owner."""

    @declared_attr
    def user_id(cls):
        return Column(
            Integer,
            ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        )


class AddressMixin:
    address_street = Column(String, nullable=True)
    address_line2 = Column(String, nullable=True)
    address_city = Column(String, nullable=True)
    address_region = Column(String, nullable=True)
    address_postcode = Column(String, nullable=True)
    address_country = Column(String, nullable=True)
