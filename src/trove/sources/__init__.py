"""
Snapshot file sources.

- normalizer: decode one file and flatten it into owner-tagged items
- aggregator: load every snapshot file from a list of directories
- fingerprint: mtime scans used for change detection
"""

from trove.sources.aggregator import list_source_files, load
from trove.sources.fingerprint import JSON_SUFFIX, collect_fingerprints, needs_reload
from trove.sources.normalizer import decode_document, normalize_document, normalize_file

__all__ = [
    "JSON_SUFFIX",
    "collect_fingerprints",
    "decode_document",
    "list_source_files",
    "load",
    "needs_reload",
    "normalize_document",
    "normalize_file",
]
