"""Bundled resources for spectree."""
