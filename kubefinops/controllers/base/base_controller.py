"""Base controller with async worker-friendly patterns for KubeFinOps.

Controllers are awaited from Textual workers, so every data-source call is a
coroutine and the UI stays responsive while metric queries are in flight.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseController(ABC):
    """Base controller class with worker-friendly patterns.

    Subclasses should implement the abstract methods to provide
    specific data fetching functionality.
    """

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    async def fetch_all(self, *args: Any, **kwargs: Any) -> Any:
        """Fetch all data from the source."""
        ...
