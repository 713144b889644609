from abc import ABC, abstractmethod


class INavigator(ABC):
    """Navigation interface - application layer"""

    @abstractmethod
    def exit_to_login(self) -> None:
        """Leave the recovery workflow and return to the login screen"""
        pass
