from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from flight_planner.core.models import Airport


class AirportDirectory(ABC):
    """Resolve airport codes to Airport records."""

    @abstractmethod
    def lookup(self, code: str) -> Optional[Airport]:
        raise NotImplementedError

    @abstractmethod
    def search(self, query: str, limit: int = 50) -> List[Airport]:
        raise NotImplementedError
