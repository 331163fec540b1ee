"""
Literature catalog
Lists the literature folder and turns file names into display titles
"""

import logging
import os
from typing import Iterable, List, Tuple
from urllib.parse import quote

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

URL_PREFIX = "/literature/"
# Characters a path segment keeps unescaped besides letters, digits and "_.-~";
# "/ ; , ?" are always escaped
PATH_SEGMENT_SAFE = "$&+:=@"


class CatalogEntry(BaseModel):
    displayName: str
    fileName: str
    url: str


def clean_file_name(name: str) -> str:
    """Turn a file name into a readable title.

    "1_Intro_to_Systems.pdf" becomes "Intro to Systems". Only a single leading
    digit followed by a space is treated as an ordinal prefix, so
    "12 Chapter.pdf" keeps its number.
    """
    dot = name.rfind(".")
    if dot != -1:
        name = name[:dot]
    name = name.replace("_", " ").replace("-", " ")

    if len(name) > 2 and name[1] == " " and "0" <= name[0] <= "9":
        name = name[2:]
    return name


def catalog_url(file_name: str) -> str:
    return URL_PREFIX + quote(file_name, safe=PATH_SEGMENT_SAFE)


def build_catalog(listing: Iterable[Tuple[str, bool]]) -> List[CatalogEntry]:
    """Map (name, is_dir) pairs to catalog entries, keeping their order"""
    entries = []
    for name, is_dir in listing:
        if is_dir or name.startswith("."):
            continue  # folders and hidden files
        entries.append(CatalogEntry(
            displayName=clean_file_name(name),
            fileName=name,
            url=catalog_url(name),
        ))
    return entries


class LiteratureCatalog:
    """Reads the literature folder on every call, nothing is cached"""

    def __init__(self, directory: str):
        self.directory = directory

    def listing(self) -> List[Tuple[str, bool]]:
        with os.scandir(self.directory) as it:
            items = [(entry.name, entry.is_dir(follow_symlinks=False)) for entry in it]
        return sorted(items)

    def entries(self) -> List[CatalogEntry]:
        return build_catalog(self.listing())


router = APIRouter()


@router.get("/api/literature")
def literature_api(request: Request):
    """List the books in the literature folder"""
    headers = {"Access-Control-Allow-Origin": "*"}
    catalog = LiteratureCatalog(request.app.state.settings.literature_dir)
    try:
        books = catalog.entries()
    except OSError as e:
        logger.error("Cannot read literature folder %s: %s", catalog.directory, e)
        return PlainTextResponse(
            f"Failed to read literature directory: {e}",
            status_code=500,
            headers=headers,
        )

    return JSONResponse(
        content=[book.model_dump() for book in books],
        headers=headers,
    )
