"""設定モジュール."""
