# parser/msbt_parser.py

import logging
from pathlib import Path
from time import monotonic
from typing import BinaryIO

from msbt_kit.observability import names
from msbt_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import BinaryParser
from .config import ParserConfig
from .cursor import Cursor
from .errors import AttributeCountMismatchError, MsbtError, UnknownSectionTagError
from .header import parse_header
from .models import MsbtDocument, ParseWarning, SectionInfo
from .sections import SECTION_DECODERS, DocumentBuilder, align

logger = logging.getLogger(__name__)


class MsbtParser(BinaryParser):
    """
    MSBT message table parser.
    - Walks exactly the declared number of sections
    - Next section start comes from the declared size, 16-byte aligned
    - Data problems that do not stop decoding become document warnings
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or ParserConfig()
        self.metrics_hook = metrics_hook

    def parse_file(self, path: str | Path) -> MsbtDocument:
        logger.info("Parsing MSBT file: %s", path)
        with open(path, "rb") as f:
            return self.parse(f.read())

    def parse(
        self, source: bytes | bytearray | memoryview | BinaryIO
    ) -> MsbtDocument:
        if hasattr(source, "read"):
            source = source.read()

        start = monotonic()
        try:
            document = self._parse(Cursor(source))
        except MsbtError as e:
            logger.error("Failed to parse MSBT data: %s", e)
            self.metrics_hook.increment(
                names.MSBT_PARSE_ERRORS_TOTAL, labels={"error": type(e).__name__}
            )
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.MSBT_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.MSBT_PARSES_TOTAL)
        self.metrics_hook.increment(
            names.MSBT_MESSAGES_DECODED, len(document.messages)
        )
        for warning in document.warnings:
            self.metrics_hook.increment(
                names.MSBT_PARSE_WARNINGS, labels={"code": warning.code}
            )

        logger.info(
            "Parsed MSBT: %d labels, %d messages, %d attributes, %d warnings",
            len(document.labels),
            len(document.messages),
            len(document.attributes),
            len(document.warnings),
        )
        return document

    def _parse(self, cursor: Cursor) -> MsbtDocument:
        header = parse_header(cursor)
        builder = DocumentBuilder()
        sections: list[SectionInfo] = []
        warnings: list[ParseWarning] = []

        for _ in range(header.section_count):
            tag = cursor.read_text(4)
            size = cursor.read_u32()
            cursor.skip(8)
            body_start = cursor.tell()

            decoder = SECTION_DECODERS.get(tag)
            if decoder is not None:
                logger.debug("Decoding %s at %#x (%d bytes)", tag, body_start, size)
                decoder(cursor, builder)
                self.metrics_hook.increment(
                    names.MSBT_SECTIONS_DECODED, labels={"tag": tag}
                )
            elif self.config.unknown_section_policy == "skip":
                logger.warning(
                    "Skipping unknown section %r at %#x (%d bytes)",
                    tag,
                    body_start,
                    size,
                )
                warnings.append(
                    ParseWarning(
                        code="unknown_section",
                        message=f"Skipped unknown section {tag!r} at {body_start:#x}",
                    )
                )
            else:
                logger.error("Unknown section tag %r at %#x", tag, body_start)
                raise UnknownSectionTagError(f"Unknown section tag {tag!r}")

            sections.append(
                SectionInfo(
                    tag=tag,
                    offset=body_start,
                    size=size,
                    decoded=decoder is not None,
                )
            )
            cursor.seek(align(body_start + size))

        warnings.extend(self._check(builder))

        return MsbtDocument(
            byte_order=header.byte_order,
            section_count=header.section_count,
            declared_file_size=header.declared_file_size,
            labels=tuple(builder.labels),
            messages=tuple(builder.messages),
            attributes=tuple(builder.attributes),
            style_ids=tuple(builder.style_ids),
            attribute_count=builder.attribute_count,
            attribute_size=builder.attribute_size,
            sections=tuple(sections),
            warnings=tuple(warnings),
        )

    def _check(self, builder: DocumentBuilder) -> list[ParseWarning]:
        warnings: list[ParseWarning] = []

        if (
            builder.has_labels
            and builder.attribute_count is not None
            and builder.attribute_count != len(builder.labels)
        ):
            message = (
                f"ATR1 declares {builder.attribute_count} messages "
                f"but LBL1 holds {len(builder.labels)} labels"
            )
            if self.config.strict_attribute_count:
                logger.error(message)
                raise AttributeCountMismatchError(message)
            logger.warning(message)
            warnings.append(
                ParseWarning(code="attribute_count_mismatch", message=message)
            )

        if self.config.check_label_indices and builder.has_text:
            for label in builder.labels:
                if label.message_index >= len(builder.messages):
                    message = (
                        f"Label {label.name!r} points at message "
                        f"{label.message_index}, only {len(builder.messages)} exist"
                    )
                    logger.warning(message)
                    warnings.append(
                        ParseWarning(code="label_index_out_of_range", message=message)
                    )

        return warnings


def parse_msbt(
    data: bytes | bytearray | memoryview,
    config: ParserConfig | None = None,
) -> MsbtDocument:
    """Decode ``data`` with a one-off parser.

    Example:
        >>> document = parse_msbt(Path("common.msbt").read_bytes())
        >>> document.get("greeting")
    """
    return MsbtParser(config=config).parse(data)
