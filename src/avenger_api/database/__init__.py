"""データベース層."""
