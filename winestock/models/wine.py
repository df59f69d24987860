import enum
from sqlalchemy import Column, Integer, String, ForeignKey, Enum, CheckConstraint
from sqlalchemy.orm import relationship
from .base import BaseModel, Base


class ConsignedStatus(str, enum.Enum):
    IN_PROGRESS = 'EM_ANDAMENTO'
    FINISHED = 'FINALIZADO'


class Wine(BaseModel):
    """Wine inventory record. ``price`` is stored in cents."""
    __tablename__ = 'wines'
    __table_args__ = (
        CheckConstraint('price >= 0', name='ck_wines_price_non_negative'),
    )

    name = Column(String(150), nullable=False, index=True)
    harvest = Column(Integer)
    type = Column(String(50), nullable=False)
    price = Column(Integer, nullable=False)
    producer = Column(String(100), nullable=False)
    country = Column(String(60), nullable=False)
    size = Column(String(20), nullable=False)

    wine_on_consigned = relationship('WineOnConsigned', back_populates='wine',
                                     cascade='all, delete-orphan')

    def __repr__(self):
        return f'<Wine {self.name} {self.harvest or ""}>'


class Consigned(BaseModel):
    """Wine stock placed with a customer"""
    __tablename__ = 'consigned'

    customer_id = Column(String(36), ForeignKey('customers.id'), nullable=False, index=True)
    status = Column(Enum(ConsignedStatus, values_callable=lambda e: [m.value for m in e],
                         native_enum=False, length=20),
                    nullable=False, default=ConsignedStatus.IN_PROGRESS)

    customer = relationship('Customer', back_populates='consigned')
    wines_on_consigned = relationship('WineOnConsigned', back_populates='consigned',
                                      cascade='all, delete-orphan')

    def __repr__(self):
        return f'<Consigned {self.id} {self.status}>'


class WineOnConsigned(Base):
    """Line item of a consignment: remaining balance of one wine"""
    __tablename__ = 'wine_on_consigned'

    wine_id = Column(String(36), ForeignKey('wines.id', ondelete='CASCADE'), primary_key=True)
    consigned_id = Column(String(36), ForeignKey('consigned.id', ondelete='CASCADE'), primary_key=True)
    balance = Column(Integer, nullable=False, default=0)

    wine = relationship('Wine', back_populates='wine_on_consigned')
    consigned = relationship('Consigned', back_populates='wines_on_consigned')
