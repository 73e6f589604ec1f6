"""アベンジャーのリクエスト・レスポンススキーマ."""

from pydantic import BaseModel, ConfigDict


class AvengerCreate(BaseModel):
    """アベンジャー登録リクエストスキーマ.

    ``name`` 以外のフィールド(``id`` を含む)は無視する。
    """

    model_config = ConfigDict(extra="ignore")

    name: str


class AvengerResponse(BaseModel):
    """アベンジャーレスポンススキーマ."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None
