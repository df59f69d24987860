from sqlalchemy import Column, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from .base import BaseModel


class Customer(BaseModel):
    """Customer holding wine on consignment.

    ``document``, ``email`` and ``state_registration`` are unique only among
    active customers, so they are indexed but carry no unique constraint:
    a disabled customer must not block a new registration.
    """
    __tablename__ = 'customers'

    name = Column(String(150), nullable=False)
    document = Column(String(20), nullable=False, index=True)
    contact_person = Column(String(100))
    email = Column(String(150), index=True)
    cellphone = Column(String(20))
    business_phone = Column(String(20))
    state_registration = Column(String(20), index=True)

    # Soft delete
    disabled_at = Column(DateTime, nullable=True, index=True)

    # Relationships
    address = relationship('Address', back_populates='customer', uselist=False,
                           cascade='all, delete-orphan')
    consigned = relationship('Consigned', back_populates='customer')
    users = relationship('User', back_populates='customer')

    @property
    def is_active(self):
        return self.disabled_at is None

    def __repr__(self):
        return f'<Customer {self.name}>'


class Address(BaseModel):
    """Postal address, one per customer"""
    __tablename__ = 'addresses'

    customer_id = Column(String(36), ForeignKey('customers.id'), unique=True, nullable=False)

    city = Column(String(100))
    state = Column(String(50))
    street_address = Column(String(200))
    number = Column(String(20))
    zip_code = Column(String(10))
    neighborhood = Column(String(100))

    customer = relationship('Customer', back_populates='address')

    def __repr__(self):
        return f'<Address {self.street_address}, {self.number} - {self.city}>'
