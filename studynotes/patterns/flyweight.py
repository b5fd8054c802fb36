"""Flyweight: web sites shared between users by category."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class User:
    name: str


class WebSite(ABC):
    @abstractmethod
    def use(self, user: User) -> str:
        """Return a line describing ``user`` using the site."""


class ConcreteWebSite(WebSite):
    """A site identified by its category name."""

    def __init__(self, name: str) -> None:
        self.name = name

    def use(self, user: User) -> str:
        return f"网站分类: {self.name}, 用户: {user.name}"


class WebSiteFactory:
    """Hands out one shared site per category name."""

    def __init__(self) -> None:
        self._sites: dict[str, ConcreteWebSite] = {}

    def get_website(self, name: str) -> WebSite:
        site = self._sites.get(name)
        if site is None:
            site = self._sites[name] = ConcreteWebSite(name)
        return site

    def website_count(self) -> int:
        return len(self._sites)