"""アベンジャーのリクエスト・レスポンススキーマ."""

from .avenger import AvengerCreate, AvengerResponse

__all__ = ["AvengerCreate", "AvengerResponse"]
