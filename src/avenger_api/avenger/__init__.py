"""アベンジャーAPI."""
