"""
Static file mounts for the reading interface and the books themselves
"""

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles


def mount_static(app: FastAPI, literature_dir: str, static_dir: str) -> None:
    """Mount /literature and / ; call after the API routes so they win"""
    app.mount(
        "/literature",
        StaticFiles(directory=literature_dir, check_dir=False),
        name="literature",
    )
    # index.html is served for "/"
    app.mount(
        "/",
        StaticFiles(directory=static_dir, html=True, check_dir=False),
        name="static",
    )
