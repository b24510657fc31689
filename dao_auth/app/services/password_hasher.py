from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """One-way password hashing contract"""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Salted, cost-tunable hash of a plaintext password"""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """True if password matches. Malformed hashes verify as False."""
        pass

    @abstractmethod
    def verify_dummy(self, password: str) -> None:
        """Spend the cost of one verify() when there is no stored hash to check"""
        pass
