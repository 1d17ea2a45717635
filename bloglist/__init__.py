"""Bloglist backend."""
