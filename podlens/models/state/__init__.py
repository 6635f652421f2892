"""Application state, settings and the message/effect vocabulary."""
