"""
SortedContainer abstract base class for ordered key storage.
"""

from abc import ABC, abstractmethod
from typing import Any


class SortedContainer(ABC):
    """
    Abstract base class for ordered key containers.

    Provides O(log N) operations for insert, find, and remove.

    Implementations:
    - RedBlackTree
    """

    @abstractmethod
    def insert(self, key: Any) -> Any:
        """
        Insert a key.

        Args:
            key: The key to insert.

        Returns:
            The container entry holding the key.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def find(self, key: Any) -> Any | None:
        """
        Look up a key.

        Args:
            key: The key to look up.

        Returns:
            The entry holding the key if found, None otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def remove(self, key: Any) -> None:
        """
        Remove a key.

        Args:
            key: The key to remove.

        Raises:
            KeyNotFoundError: If the key is not stored.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> bool:
        """
        Remove a key, reporting absence as a result instead of an error.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored keys.

        Time complexity: O(1)
        """
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return self.has(key)
