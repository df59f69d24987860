"""
Password Hashing
================

Thin wrapper over bcrypt used by the user service.
"""

import bcrypt


class PasswordHasher:
    """One-way salted hashing of user passwords"""

    def hash(self, plaintext: str, rounds: int) -> str:
        salt = bcrypt.gensalt(rounds=rounds)
        return bcrypt.hashpw(plaintext.encode('utf-8'), salt).decode('utf-8')

    def verify(self, plaintext: str, hashed: str) -> bool:
        if not hashed:
            return False
        return bcrypt.checkpw(plaintext.encode('utf-8'), hashed.encode('utf-8'))
