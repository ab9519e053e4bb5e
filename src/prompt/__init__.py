"""Prompt templates and the pystache renderer."""
