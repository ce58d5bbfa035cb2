from __future__ import annotations

import os
from dataclasses import dataclass, field

from .bmp.constants import DEFAULT_RESOLUTION

DEFAULT_OUTPUT_PATH = "output.bmp"
DEFAULT_ALGORITHM = "builtin"
OUTPUT_ENV_VAR = "IMGSORT_OUTPUT"
ALGORITHM_ENV_VAR = "IMGSORT_ALGORITHM"


@dataclass
class CodecSettings:
    resolution_horz: int = DEFAULT_RESOLUTION
    resolution_vert: int = DEFAULT_RESOLUTION
    atomic: bool = True


def _env_output_path() -> str:
    return os.environ.get(OUTPUT_ENV_VAR) or DEFAULT_OUTPUT_PATH


def _env_algorithm() -> str:
    return os.environ.get(ALGORITHM_ENV_VAR) or DEFAULT_ALGORITHM


@dataclass
class AppSettings:
    output_path: str = field(default_factory=_env_output_path)
    algorithm: str = field(default_factory=_env_algorithm)
    codec: CodecSettings = field(default_factory=CodecSettings)
