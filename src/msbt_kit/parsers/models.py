# parser/models.py

from dataclasses import dataclass
from enum import Enum


class ByteOrder(str, Enum):
    """Byte order selected by the header's BOM."""

    BIG = "big"
    LITTLE = "little"


@dataclass(frozen=True)
class Label:
    name: str
    message_index: int


@dataclass(frozen=True)
class SectionInfo:
    tag: str
    offset: int  # body start, absolute
    size: int
    decoded: bool = True


@dataclass(frozen=True)
class ParseWarning:
    code: str
    message: str


@dataclass(frozen=True)
class MsbtHeader:
    byte_order: ByteOrder
    section_count: int
    declared_file_size: int


@dataclass(frozen=True)
class MsbtDocument:
    """A fully decoded message table.

    Built once by the parser and never modified afterwards.
    """

    byte_order: ByteOrder
    section_count: int
    declared_file_size: int
    labels: tuple[Label, ...] = ()
    messages: tuple[str, ...] = ()
    attributes: tuple[bytes, ...] = ()
    style_ids: tuple[int, ...] = ()  # TSY1 is not decoded
    attribute_count: int | None = None
    attribute_size: int = 0
    sections: tuple[SectionInfo, ...] = ()
    warnings: tuple[ParseWarning, ...] = ()

    def get(self, name: str) -> str:
        """Return the message text for a label name."""
        for label in self.labels:
            if label.name == name:
                if label.message_index >= len(self.messages):
                    raise KeyError(
                        f"Label '{name}' points at missing message "
                        f"{label.message_index}"
                    )
                return self.messages[label.message_index]
        raise KeyError(f"Label '{name}' not found")

    def as_dict(self) -> dict[str, str]:
        """Map label names to message text, skipping out-of-range labels."""
        return {
            label.name: self.messages[label.message_index]
            for label in self.labels
            if label.message_index < len(self.messages)
        }
