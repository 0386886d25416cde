"""Embedded ```meta front matter: TOML parsed into Metadata"""

import logging
import tomllib
from typing import Optional

from pydantic import ValidationError

from mdnotes.core.models import Metadata


logger = logging.getLogger(__name__)

META_TAG = "meta"


def is_meta_tag(info: str) -> bool:
    """True when a code fence's trimmed info string is exactly 'meta'."""
    return info.strip() == META_TAG


def parse_meta(text: str) -> Optional[Metadata]:
    """Parse a meta block body. Errors are logged and yield None so compilation can continue."""
    try:
        return Metadata.model_validate(tomllib.loads(text))
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        logger.error("Failed to parse metadata: %s", e)
        return None
