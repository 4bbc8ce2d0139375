from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class Villa(Base):
    """A rental villa"""
    __tablename__ = "villas"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(30), unique=True, nullable=False)
    details = Column(Text)
    rate = Column(Float, nullable=False, default=0)
    sqft = Column(Integer, nullable=False, default=0)
    capacity = Column(Integer, nullable=False, default=0)
    image_url = Column(String(255))
    amenity = Column(String(255))
    created_date = Column(DateTime, server_default=func.now())
    updated_date = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # One-to-one: VillaNumber is keyed by the owning villa's id
    villa_number = relationship(
        "VillaNumber",
        back_populates="villa",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class VillaNumber(Base):
    """A numbered unit; its primary key is the owning villa's id (not generated)"""
    __tablename__ = "villa_numbers"

    villa_id = Column(
        Integer,
        ForeignKey("villas.id", ondelete="CASCADE", name="fk_villa_numbers_villas_villa_id"),
        primary_key=True,
        autoincrement=False,
    )
    villa_no = Column(Integer, unique=True, index=True, nullable=False)
    special_details = Column(Text)
    created_date = Column(DateTime, server_default=func.now())
    updated_date = Column(DateTime, server_default=func.now(), onupdate=func.now())

    villa = relationship("Villa", back_populates="villa_number")
