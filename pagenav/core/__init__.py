"""Configuration for pagenav."""
