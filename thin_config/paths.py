"""Filesystem path helpers for the Thin configuration package."""

import os


def get_project_dir() -> str:
    """Return the absolute path to the project the host is running from."""
    return os.path.abspath(os.getcwd())


def public_path(filename: str) -> str:
    """Return an absolute path to a file inside the public directory."""
    return os.path.join(get_project_dir(), "public", filename)
