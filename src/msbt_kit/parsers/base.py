# parser/base.py

from abc import ABC, abstractmethod
from typing import BinaryIO

from .models import MsbtDocument


class BinaryParser(ABC):
    @abstractmethod
    def parse(
        self, source: bytes | bytearray | memoryview | BinaryIO
    ) -> MsbtDocument:
        """
        Parse an in-memory container and return a fully decoded document.

        Requirements:
        - Deterministic output for same input
        - The input buffer is never modified
        - Either a complete document or an exception, never both
        """
        raise NotImplementedError
