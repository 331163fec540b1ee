"""
Runtime configuration for the literature reader
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "LITREADER_"


class Settings(BaseModel):
    """Directories, listen address and compile service used by the app"""

    literature_dir: str = Field("Література", description="Folder with the books")
    static_dir: str = Field("static", description="index.html, reader.html, JS/CSS")
    host: str = "0.0.0.0"
    port: int = Field(8080, ge=1, le=65535)
    compile_url: str = "https://play.golang.org/compile"
    compile_timeout: float = Field(30.0, gt=0)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from LITREADER_* variables, keeping defaults for unset ones"""
        if environ is None:
            environ = os.environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is not None and raw != "":
                values[name] = raw
        return cls(**values)
