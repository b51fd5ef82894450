from abc import ABC, abstractmethod


class LoggingPort(ABC):
    """Minimal logger surface used by the executors.

    Arguments after ``msg`` follow stdlib ``%``-style lazy formatting.
    """

    @abstractmethod
    def debug(self, msg: str, *args):
        pass

    @abstractmethod
    def info(self, msg: str, *args):
        pass

    @abstractmethod
    def warning(self, msg: str, *args):
        pass

    @abstractmethod
    def error(self, msg: str, *args):
        pass
