#!/usr/bin/env python3
"""
File format configuration and path classification

Derives the record format and compression of a file purely from the
extensions of its path. File contents are never inspected.
"""

import json
import os
from dataclasses import dataclass, asdict
from enum import Enum
from pathlib import Path, PurePath
from typing import Dict, Optional, Tuple, Union

from ..errors import UnknownFileTypeError

PathLike = Union[str, PurePath]


class FileType(Enum):
    """Sequence record formats"""
    FASTA = "fasta"
    FASTQ = "fastq"

    @classmethod
    def from_path(cls, path: PathLike, config: Optional["FormatConfig"] = None) -> "FileType":
        """Format of ``path``, ignoring a trailing compression suffix"""
        return classify(path, config)[0]

    @classmethod
    def from_str(cls, text: str) -> "FileType":
        return cls.from_path(text)


@dataclass(frozen=True)
class FormatConfig:
    """
    Extension rules used to classify sequence file paths

    Attributes:
        fasta_extensions: Extensions mapping to FASTA
        fastq_extensions: Extensions mapping to FASTQ
        compression_suffix: Single trailing suffix marking gzip compression
        compression_level: gzip level used when writing compressed output
        case_sensitive: Whether extensions are compared case-sensitively
    """
    fasta_extensions: Tuple[str, ...] = (".fa", ".fasta")
    fastq_extensions: Tuple[str, ...] = (".fq", ".fastq")
    compression_suffix: str = ".gz"
    compression_level: int = 6
    case_sensitive: bool = True

    def __post_init__(self):
        """Validate configuration parameters"""
        # Lists coming from JSON are normalised to tuples so the config stays hashable
        object.__setattr__(self, "fasta_extensions", tuple(self.fasta_extensions))
        object.__setattr__(self, "fastq_extensions", tuple(self.fastq_extensions))

        for ext in self.fasta_extensions + self.fastq_extensions + (self.compression_suffix,):
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"Extensions must start with '.', got {ext!r}")

        overlap = set(self._normalise(self.fasta_extensions)) & set(self._normalise(self.fastq_extensions))
        if overlap:
            raise ValueError(f"Extensions cannot map to both fasta and fastq: {sorted(overlap)}")

        if not 0 <= self.compression_level <= 9:
            raise ValueError(f"compression_level must be between 0 and 9, got {self.compression_level}")

    def _normalise(self, extensions: Tuple[str, ...]) -> Tuple[str, ...]:
        if self.case_sensitive:
            return extensions
        return tuple(ext.lower() for ext in extensions)

    @classmethod
    def from_dict(cls, config_data: Dict) -> "FormatConfig":
        """Build configuration from a dictionary; missing keys take defaults"""
        known = set(cls.__dataclass_fields__)
        unknown = set(config_data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**config_data)

    @classmethod
    def from_file(cls, config_file: PathLike) -> "FormatConfig":
        """Load configuration from a JSON file"""
        config_path = Path(config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file does not exist: {config_file}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)

        return cls.from_dict(config_data)

    def to_dict(self) -> Dict:
        data = asdict(self)
        data["fasta_extensions"] = list(self.fasta_extensions)
        data["fastq_extensions"] = list(self.fastq_extensions)
        return data


DEFAULT_FORMAT_CONFIG = FormatConfig()


def _file_name(path: PathLike, config: FormatConfig) -> str:
    name = PurePath(path).name
    return name if config.case_sensitive else name.lower()


def is_compressed(path: PathLike, config: Optional[FormatConfig] = None) -> bool:
    """
    Check whether a path ends in the compression suffix

    Args:
        path: File path
        config: Extension rules, defaults to DEFAULT_FORMAT_CONFIG

    Returns:
        bool: True if the last extension is the compression suffix
    """
    config = config or DEFAULT_FORMAT_CONFIG
    suffix = config.compression_suffix if config.case_sensitive else config.compression_suffix.lower()
    return _file_name(path, config).endswith(suffix)


def classify(path: PathLike, config: Optional[FormatConfig] = None) -> Tuple[FileType, bool]:
    """
    Classify a path by its extension chain

    Args:
        path: File path, e.g. "data/in.fq.gz"
        config: Extension rules, defaults to DEFAULT_FORMAT_CONFIG

    Returns:
        Tuple[FileType, bool]: Record format and whether the file is compressed

    Raises:
        UnknownFileTypeError: If the path has no recognised extension. The
            error carries strings verbatim; pathlib paths are reported in the
            normalised form pathlib gives them (Path("") is ".").

    Examples:
        >>> classify("data/in.fa.gz")
        (<FileType.FASTA: 'fasta'>, True)
    """
    config = config or DEFAULT_FORMAT_CONFIG
    name = _file_name(path, config)

    compressed = is_compressed(path, config)
    if compressed:
        name = name[:-len(config.compression_suffix)]

    extension = PurePath(name).suffix if name else ""
    if extension and extension in config._normalise(config.fasta_extensions):
        return FileType.FASTA, compressed
    if extension and extension in config._normalise(config.fastq_extensions):
        return FileType.FASTQ, compressed

    raise UnknownFileTypeError(os.fspath(path))
