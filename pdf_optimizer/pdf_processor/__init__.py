from .compress import GhostscriptCompressor
from .document import count_pages
from .references import extract_references
from .scratch import scratch_files

__all__ = [
    "GhostscriptCompressor",
    "count_pages",
    "extract_references",
    "scratch_files",
]
