"""Search index construction from processed markdown sections."""

from .builder import BuildResult, PipelineConfig, SearchIndexBuilder
from .minisearch import MiniSearchIndex, tokenize
from .records import RecordBuilder, SearchRecord, document_base_title, filter_records
from .routes import RouteAllowList, normalize_route
from .url_mapper import build_href, compute_base_url, strip_fragment
from .writer import IndexArtifactNotFoundError, find_index_artifact, mirror, write_text

__all__ = [
    "BuildResult",
    "PipelineConfig",
    "SearchIndexBuilder",
    "MiniSearchIndex",
    "tokenize",
    "RecordBuilder",
    "SearchRecord",
    "document_base_title",
    "filter_records",
    "RouteAllowList",
    "normalize_route",
    "build_href",
    "compute_base_url",
    "strip_fragment",
    "IndexArtifactNotFoundError",
    "find_index_artifact",
    "mirror",
    "write_text",
]
