from pathlib import Path

import pytest
from msbt_builder import (
    SAMPLE_LABELS,
    SAMPLE_MESSAGES,
    atr1_body,
    lbl1_body,
    msbt,
    section,
    txt2_body,
)

from msbt_kit.parsers.models import MsbtDocument
from msbt_kit.parsers.msbt_parser import MsbtParser


def _write_table(path: Path, order: str) -> None:
    """Writes a four-message table with every known section type."""
    attributes = [bytes([i, 0, 0, 0]) for i in range(len(SAMPLE_MESSAGES))]
    data = msbt(
        section("LBL1", lbl1_body(SAMPLE_LABELS, order), order),
        section("ATR1", atr1_body(attributes, 4, order), order),
        section("TSY1", b"\x00" * 4 * len(SAMPLE_MESSAGES), order),
        section("TXT2", txt2_body(SAMPLE_MESSAGES, order), order),
        order=order,
    )
    path.write_bytes(data)


@pytest.fixture(scope="module")
def msbt_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test tables once per module."""
    dir_path: Path = tmp_path_factory.mktemp("msbt")

    _write_table(dir_path / "little.msbt", "<")
    _write_table(dir_path / "big.msbt", ">")
    (dir_path / "config.yaml").write_text("unknown_section_policy: skip\n")

    return dir_path


@pytest.fixture(scope="module")
def parsed_little(msbt_dir: Path) -> MsbtDocument:
    return MsbtParser().parse_file(msbt_dir / "little.msbt")


@pytest.fixture(scope="module")
def parsed_big(msbt_dir: Path) -> MsbtDocument:
    return MsbtParser().parse_file(msbt_dir / "big.msbt")
