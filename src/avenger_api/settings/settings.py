"""アプリケーション設定を管理するモジュール."""

from functools import lru_cache

from pydantic import computed_field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """アプリケーション全体の設定を管理するクラス.

    環境変数から設定値を読み込み、データベース接続情報などを提供する。

    Attributes
    ----------
        environment: 実行環境(development, production等)
        postgres_host: PostgreSQLホスト名
        postgres_port: PostgreSQLポート番号
        postgres_user: PostgreSQLユーザー名
        postgres_password: PostgreSQLパスワード
        postgres_database: PostgreSQLデータベース名
        database_url: 接続URLの直接指定(指定時はPostgreSQL設定より優先)
        sql_log: SQLログの出力有無(デフォルト: False)
        log_level: アプリケーションのログレベル
        auto_create_tables: 起動時にテーブルを作成するか
        api_host: APIサーバーの待受ホスト
        api_port: APIサーバーの待受ポート

    """

    environment: str

    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_database: str = "avengers"

    database_url: str | None = None

    sql_log: bool = False
    log_level: str = "INFO"
    auto_create_tables: bool = False

    api_host: str = "127.0.0.1"
    api_port: int = 8000

    @computed_field  # type: ignore[prop-decorator]
    @property
    def postgres_driver_url(self) -> str:
        """PostgreSQLの非同期接続URLを生成する.

        Returns
        -------
            str: asyncpg用のPostgreSQL接続URL

        """
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_database}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def sqlalchemy_url(self) -> str:
        """エンジン生成に使用する接続URL.

        Returns
        -------
            str: database_urlが指定されていればその値、なければPostgreSQL接続URL

        """
        return self.database_url or self.postgres_driver_url


@lru_cache
def get_settings() -> Settings:
    """アプリケーション設定のシングルトンインスタンスを取得する.

    Returns
    -------
        Settings: アプリケーション設定オブジェクト

    """
    return Settings()
