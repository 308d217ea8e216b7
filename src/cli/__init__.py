"""Capa CLI (Typer + Rich): parsing, mensajes y exit codes."""
