"""アベンジャーのデータモデルを定義するモジュール."""

from sqlalchemy import Column, Integer, Text
from sqlmodel import Field, SQLModel


class Avenger(SQLModel, table=True):
    """アベンジャーを表すデータベースモデル.

    Attributes
    ----------
        id: 自動採番ID(主キー、再利用されない)
        name: アベンジャーの名前

    """

    __tablename__ = "avenger"
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )
    name: str | None = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )
