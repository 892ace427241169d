"""Schema loading and document tracing.

Builds the schema from SDL files, parses query documents, and walks each one
with a ``TypeContextTracker`` driven by ``graphql.visit`` to produce trace
records.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from graphql import DocumentNode, GraphQLError, GraphQLSchema, Source, build_schema, parse, visit

from gqlcontext.config import GqlContextConfig, load_config
from gqlcontext.constants.config import DEFAULT_TRACE_KINDS
from gqlcontext.context import FieldDefResolver, TypeContextTracker, TypeContextVisitor
from gqlcontext.exceptions import DocumentParseError, SchemaLoadError
from gqlcontext.model import DocumentTrace, TraceEntry, TraceResult
from gqlcontext.trace.collector import TraceCollector
from gqlcontext.trace.discovery import discover_documents, stable_path_key

logger = logging.getLogger(__name__)


def load_schema(paths: Sequence[Path]) -> GraphQLSchema:
    """Read SDL from *paths* and build a single schema from their concatenation."""
    if not paths:
        raise SchemaLoadError("No schema files given")

    chunks: list[str] = []
    for path in paths:
        try:
            chunks.append(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise SchemaLoadError(f"Failed to read schema file {path}: {exc}") from exc

    try:
        schema = build_schema("\n".join(chunks))
    except (GraphQLError, TypeError) as exc:
        names = ", ".join(str(path) for path in paths)
        raise SchemaLoadError(f"Invalid schema in {names}: {exc}") from exc

    logger.debug("Built schema from %d file(s) with %d types", len(paths), len(schema.type_map))
    return schema


def parse_document(path: Path) -> DocumentNode:
    """Read and parse a GraphQL document."""
    try:
        body = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentParseError(f"Failed to read document {path}: {exc}") from exc

    try:
        return parse(Source(body, str(path)))
    except GraphQLError as exc:
        raise DocumentParseError(f"Invalid document {path}: {exc.message}") from exc


def trace_document(
    schema: GraphQLSchema,
    document: DocumentNode,
    kinds: Iterable[str] = DEFAULT_TRACE_KINDS,
    *,
    get_field_def_fn: FieldDefResolver | None = None,
) -> tuple[TraceEntry, ...]:
    """Walk *document* and return tracker state for every node of *kinds*."""
    tracker = TypeContextTracker(schema, get_field_def_fn)
    collector = TraceCollector(tracker, kinds)
    visit(document, TypeContextVisitor(tracker, collector))
    return tuple(collector.entries)


def trace_documents(
    schema: GraphQLSchema,
    paths: Sequence[Path],
    kinds: Iterable[str] = DEFAULT_TRACE_KINDS,
    *,
    root: Path | None = None,
) -> tuple[DocumentTrace, ...]:
    """Parse and trace each document in *paths*, in the order given."""
    kinds = tuple(kinds)
    resolved_root = root.resolve() if root is not None else None
    traces: list[DocumentTrace] = []
    for path in paths:
        entries = trace_document(schema, parse_document(path), kinds)
        display_path = stable_path_key(path.resolve(), resolved_root) if resolved_root else str(path)
        trace = DocumentTrace(path=display_path, entries=entries)
        if trace.unresolved:
            logger.debug("%s: %d unresolved reference(s)", display_path, trace.unresolved)
        traces.append(trace)
    return tuple(traces)


def run_trace(
    root: Path,
    config_path: Path | None = None,
    *,
    schema_paths: tuple[Path, ...] | None = None,
    document_paths: tuple[Path, ...] | None = None,
    config: GqlContextConfig | None = None,
) -> TraceResult:
    """Resolve config, load the schema, discover documents and trace them.

    Explicit *schema_paths* and *document_paths* override the config file.
    Relative paths, explicit or configured, are taken relative to *root*.
    """
    root = root.resolve()
    if config is None:
        config = load_config(root, config_path)

    schemas = tuple(root / path for path in (schema_paths or config.schema_paths))
    schema = load_schema(schemas)

    if document_paths:
        documents = [root / path for path in document_paths]
    else:
        documents = discover_documents(root, config.document_globs, config.max_file_kb, exclude=schemas)

    traces = trace_documents(schema, documents, config.kinds, root=root)
    logger.info("Traced %d document(s)", len(traces))
    return TraceResult(
        schema_paths=tuple(stable_path_key(path.resolve(), root) for path in schemas),
        documents=traces,
    )
