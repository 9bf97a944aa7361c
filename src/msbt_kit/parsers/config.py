# parser/config.py

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel

logger = logging.getLogger(__name__)

UnknownSectionPolicy = Literal["strict", "skip"]


class ParserConfig(BaseModel):
    """Decoder policy switches.

    - unknown_section_policy: "strict" raises on an unrecognised section tag,
      "skip" steps over its declared size and records a warning.
    - strict_attribute_count: raise instead of warn when ATR1 and LBL1 disagree.
    - check_label_indices: warn about labels pointing past the last message.
    """

    unknown_section_policy: UnknownSectionPolicy = "strict"
    strict_attribute_count: bool = False
    check_label_indices: bool = True

    class Config:
        extra = "forbid"


def load_parser_config(path: str | Path) -> ParserConfig:
    logger.debug("Loading parser config from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f)
    return ParserConfig(**(data or {}))
