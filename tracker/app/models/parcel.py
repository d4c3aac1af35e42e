"""
Parcel database model.

One row per shipped parcel; the store assigns the parcel number.
"""

from sqlalchemy import Column, Integer, Text
from tracker.app.db.session import Base


class Parcel(Base):
    """
    Parcel model for the tracker.

    Status is kept as plain text so values outside ParcelStatus pass
    through unchanged. created_at is supplied by the caller, not the store.
    """
    __tablename__ = "parcel"

    number = Column(Integer, primary_key=True, autoincrement=True)

    # Ownership - not enforced against any client table
    client = Column(Integer, nullable=False, index=True)

    status = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    created_at = Column(Text, nullable=False)

    def __repr__(self):
        return f"<Parcel(number={self.number}, client={self.client}, status='{self.status}')>"
