"""Schema build use-case service."""

from __future__ import annotations

import logging

from entity_schema_mapper.configuration import ConfigurationError, load_configuration
from entity_schema_mapper.mapping_session import SchemaMappingSession
from entity_schema_mapper.schema_building import ConflictError, InvalidMemberError
from entity_schema_mapper.schema_export import write_schema_workbook
from entity_schema_mapper.schema_validation import SchemaValidationError, ensure_valid
from entity_schema_mapper.type_registry import DuplicateTypeError, UnknownTypeError

from .build_contracts import BuildOutcome, BuildRequest

_LOGGER = logging.getLogger(__name__)


class BuildExecutionError(Exception):
    """Raised when a schema build use case cannot be completed."""


def load_mapping_session(config_path: str) -> SchemaMappingSession:
    """Load a mapping document into a fresh session."""
    try:
        document = load_configuration(config_path)
        session = SchemaMappingSession(settings=document.settings)
        for descriptor in document.types:
            session.register_type(descriptor)
    except (ConfigurationError, DuplicateTypeError, OSError) as exc:
        raise BuildExecutionError(str(exc)) from exc
    for directive in document.directives:
        session.append_directive(directive)
    _LOGGER.debug(
        "Loaded %d type(s) and %d directive(s) from %s.",
        len(document.types),
        len(document.directives),
        document.path,
    )
    return session


def execute_schema_build(request: BuildRequest) -> BuildOutcome:
    """Build and validate the schema described by a mapping document.

    The workbook is written only once the schema has been validated; with
    `require_valid` an invalid schema raises and nothing is written.
    """
    session = load_mapping_session(request.config_path)
    try:
        schema = session.build()
    except (UnknownTypeError, ConflictError, InvalidMemberError) as exc:
        raise BuildExecutionError(str(exc)) from exc

    validation = session.validate(schema)
    if request.require_valid:
        try:
            ensure_valid(validation)
        except SchemaValidationError as exc:
            raise BuildExecutionError(str(exc)) from exc

    output_path = None
    if request.output_path:
        try:
            output_path = write_schema_workbook(schema, validation, request.output_path)
        except OSError as exc:
            raise BuildExecutionError(str(exc)) from exc
    return BuildOutcome(schema=schema, validation=validation, output_path=output_path)
