"""Design document format: schema, legacy migrations, import and export."""

from cabinet_studio.application.document.adapter import (
    design_to_document,
    document_to_design,
)
from cabinet_studio.application.document.loader import (
    ParseError,
    dump_design,
    export_design,
    import_design,
    load_design_file,
    parse_design,
    save_design_file,
    validate_document,
)
from cabinet_studio.application.document.migrations import migrate_document
from cabinet_studio.application.document.schema import (
    FORMAT_VERSION,
    SUPPORTED_VERSIONS,
    DesignDocument,
)

__all__ = [
    "FORMAT_VERSION",
    "SUPPORTED_VERSIONS",
    "DesignDocument",
    "ParseError",
    "design_to_document",
    "document_to_design",
    "dump_design",
    "export_design",
    "import_design",
    "load_design_file",
    "migrate_document",
    "parse_design",
    "save_design_file",
    "validate_document",
]
