# parser/header.py

import logging

from .cursor import Cursor
from .errors import BadMagicError, UnknownByteOrderError
from .models import ByteOrder, MsbtHeader

logger = logging.getLogger(__name__)

MSBT_MAGIC = "MsgStdBn"
HEADER_SIZE = 0x20

BYTE_ORDER_MARKS = {
    b"\xfe\xff": ByteOrder.BIG,
    b"\xff\xfe": ByteOrder.LITTLE,
}


def parse_header(cursor: Cursor) -> MsbtHeader:
    """
    Read the 0x20-byte container header and set ``cursor.byte_order``.

    Reserved fields are skipped without being checked.
    """
    magic = cursor.read_text(8)
    if magic != MSBT_MAGIC:
        logger.error("Bad magic: %r", magic)
        raise BadMagicError(f"Expected magic {MSBT_MAGIC!r}, got {magic!r}")

    bom = cursor.read_bytes(2)
    try:
        cursor.byte_order = BYTE_ORDER_MARKS[bom]
    except KeyError:
        logger.error("Unknown byte order mark: %s", bom.hex())
        raise UnknownByteOrderError(f"Unknown byte order mark {bom.hex()}")

    cursor.skip(2)  # reserved, 0x0000 in practice
    cursor.skip(2)  # reserved, 0x0103 in practice
    section_count = cursor.read_u16()
    cursor.skip(2)
    declared_file_size = cursor.read_u32()
    cursor.skip(10)

    logger.debug(
        "Header: byte_order=%s, sections=%d, declared_size=%d",
        cursor.byte_order.value,
        section_count,
        declared_file_size,
    )
    return MsbtHeader(
        byte_order=cursor.byte_order,
        section_count=section_count,
        declared_file_size=declared_file_size,
    )
