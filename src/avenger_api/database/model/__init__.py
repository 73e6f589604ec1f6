"""データベースモデルを一括エクスポートするモジュール.

新しいモデルを追加する際は、ここにインポート文を1行追加すると
``SQLModel.metadata`` に登録され、テーブル作成の対象になります。
"""

from .avenger import Avenger

__all__ = ["Avenger"]
