"""Declarative validation rules with externally stored, ordered rule sources."""
