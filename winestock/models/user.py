from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from .base import BaseModel, Base


class User(BaseModel):
    """Application user, optionally tied to one customer"""
    __tablename__ = 'users'

    email = Column(String(150), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    # bcrypt hash, never the plaintext
    password = Column(String(255), nullable=False)

    associated_customer_id = Column(String(36), ForeignKey('customers.id'), nullable=True)
    customer = relationship('Customer', back_populates='users')

    roles = relationship('UserRole', back_populates='user', cascade='all, delete-orphan')

    def __repr__(self):
        return f'<User {self.email}>'


class Role(BaseModel):
    __tablename__ = 'roles'

    name = Column(String(50), unique=True, nullable=False)

    users = relationship('UserRole', back_populates='role', cascade='all, delete-orphan')

    def __repr__(self):
        return f'<Role {self.name}>'


class UserRole(Base):
    """Association object between users and roles"""
    __tablename__ = 'user_roles'

    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
    role_id = Column(String(36), ForeignKey('roles.id', ondelete='CASCADE'), primary_key=True)

    user = relationship('User', back_populates='roles')
    role = relationship('Role', back_populates='users')
