from abc import ABC, abstractmethod


class INotifier(ABC):
    """Transient user notification interface - application layer"""

    @abstractmethod
    def show(self, message: str, duration_ms: int) -> None:
        """Display message for duration_ms; fire-and-forget"""
        pass
