# parser/sections.py

"""Decoders for the individual MSBT sections.

Every decoder is called with the cursor at the start of the section body and
may leave it anywhere: the dispatcher seeks past the section afterwards.
Offsets inside a section are relative to its body start.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from .cursor import Cursor
from .models import ByteOrder, Label

logger = logging.getLogger(__name__)

SECTION_ALIGNMENT = 0x10
TERMINATOR = b"\x00\x00"


@dataclass
class DocumentBuilder:
    """Mutable state filled in by the decoders during a single parse."""

    labels: list[Label] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)
    attributes: list[bytes] = field(default_factory=list)
    style_ids: list[int] = field(default_factory=list)
    attribute_count: int | None = None
    attribute_size: int = 0
    has_labels: bool = False
    has_text: bool = False


SectionDecoder = Callable[[Cursor, DocumentBuilder], None]


def align(offset: int) -> int:
    """Round ``offset`` up to the next section boundary."""
    return offset + (-offset % SECTION_ALIGNMENT)


def decode_labels(cursor: Cursor, builder: DocumentBuilder) -> None:
    base = cursor.tell()
    slot_count = cursor.read_u32()

    for _ in range(slot_count):
        label_count = cursor.read_u32()
        label_offset = cursor.read_u32()

        with cursor.detour(base + label_offset):
            for _ in range(label_count):
                length = cursor.read_u8()
                name = cursor.read_text(length)
                message_index = cursor.read_u32()
                builder.labels.append(Label(name=name, message_index=message_index))

    builder.has_labels = True
    logger.debug("LBL1: %d slots, %d labels", slot_count, len(builder.labels))


def decode_attributes(cursor: Cursor, builder: DocumentBuilder) -> None:
    base = cursor.tell()
    message_count = cursor.read_u32()
    attribute_size = cursor.read_u32()

    builder.attribute_count = message_count
    builder.attribute_size = attribute_size

    if attribute_size == 0:
        logger.debug("ATR1: %d messages without attributes", message_count)
        return

    for _ in range(message_count):
        attribute_offset = cursor.read_u32()
        with cursor.detour(base + attribute_offset):
            builder.attributes.append(cursor.read_bytes(attribute_size))

    logger.debug(
        "ATR1: %d attributes of %d bytes", len(builder.attributes), attribute_size
    )


def decode_text(cursor: Cursor, builder: DocumentBuilder) -> None:
    base = cursor.tell()
    message_count = cursor.read_u32()

    for _ in range(message_count):
        message_offset = cursor.read_u32()
        with cursor.detour(base + message_offset):
            builder.messages.append(read_message(cursor))

    builder.has_text = True
    logger.debug("TXT2: %d messages", message_count)


def read_message(cursor: Cursor) -> str:
    """Read one NUL-terminated UTF-16 string at the cursor.

    Only a zero code unit ends the string; a zero byte inside a code unit
    does not. Inline control sequences are kept as they are.
    """
    raw = bytearray()
    while True:
        unit = cursor.read_bytes(2)
        if unit == TERMINATOR:
            break
        raw += unit

    if cursor.byte_order is ByteOrder.BIG:
        raw[0::2], raw[1::2] = raw[1::2], raw[0::2]

    return raw.decode("utf-16-le", errors="surrogatepass")


def decode_styles(cursor: Cursor, builder: DocumentBuilder) -> None:
    # TSY1 layout is not decoded; the dispatcher skips the declared size.
    logger.debug("TSY1: skipped")


SECTION_DECODERS: dict[str, SectionDecoder] = {
    "LBL1": decode_labels,
    "ATR1": decode_attributes,
    "TXT2": decode_text,
    "TSY1": decode_styles,
}
