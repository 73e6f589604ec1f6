"""リポジトリモジュール."""

from .avenger_repository import (
    AvengerRepository,
    get_avenger_repository,
)

__all__ = [
    "AvengerRepository",
    "get_avenger_repository",
]
