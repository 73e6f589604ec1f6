"""共通定数."""
