"""アベンジャー管理API."""
