#!/usr/bin/env python3
"""
Sequence record data classes

FastaRecord and FastqRecord share one interface (``sequence_length``,
``render``, ``render_to``) so record consumers are written once for both
formats. Records do not know their position in the file.
"""

from dataclasses import dataclass
from typing import TextIO, Union


@dataclass(frozen=True)
class FastaRecord:
    """FASTA record: header line (without '>') and sequence"""
    header: str
    sequence: str

    @property
    def sequence_length(self) -> int:
        return len(self.sequence)

    def __len__(self) -> int:
        return self.sequence_length

    def render(self) -> str:
        """Render record in FASTA text form"""
        return f">{self.header}\n{self.sequence}\n"

    def render_to(self, sink: TextIO) -> None:
        sink.write(self.render())


@dataclass(frozen=True)
class FastqRecord:
    """FASTQ record: header line (without '@'), sequence and quality string"""
    header: str
    sequence: str
    quality: str

    @property
    def sequence_length(self) -> int:
        return len(self.sequence)

    def __len__(self) -> int:
        return self.sequence_length

    def render(self) -> str:
        """Render record in FASTQ text form"""
        return f"@{self.header}\n{self.sequence}\n+\n{self.quality}\n"

    def render_to(self, sink: TextIO) -> None:
        sink.write(self.render())


Record = Union[FastaRecord, FastqRecord]
