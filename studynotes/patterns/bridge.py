"""Bridge: phones and the software that runs on them vary apart."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PhoneSoftware(ABC):
    @abstractmethod
    def run(self) -> str:
        """Return what the software shows when run."""


class PhoneGame(PhoneSoftware):
    def run(self) -> str:
        return "手机游戏"


class PhoneChat(PhoneSoftware):
    def run(self) -> str:
        return "聊天软件"


class Phone(ABC):
    """A phone brand that runs whatever software is installed."""

    def __init__(self) -> None:
        self.software: PhoneSoftware | None = None

    def set_software(self, software: PhoneSoftware) -> None:
        self.software = software

    def run(self) -> str:
        if self.software is None:
            raise RuntimeError("no software installed")
        return self.software.run()


class PhoneA(Phone):
    pass


class PhoneB(Phone):
    pass