from abc import ABC, abstractmethod
from typing import Any


class Transport(ABC):
    attempts: int = 0

    @abstractmethod
    def send(self, endpoint: str, payload: dict[str, Any], credentials: str) -> str:
        """POST ``payload`` and return the model's text output."""
        pass
