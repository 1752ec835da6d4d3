"""Shared base for resource wrappers."""
from dataclasses import dataclass

from payrex.core.http import HttpClient


@dataclass
class Resource:
    """One API resource; every method issues exactly one HTTP call."""
    http: HttpClient
    base_path: str = ""

    def _path(self, *parts: str) -> str:
        return "/".join([self.base_path, *(str(part) for part in parts)])
