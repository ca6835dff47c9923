"""Source file subpackage: locating, creating and editing the commit id constant."""

from commitstamp.core.source_file.abc import SourceFiles
from commitstamp.core.source_file.dry_run import DryRunSourceFiles
from commitstamp.core.source_file.languages import (
    JAVA,
    KOTLIN,
    LANGUAGES,
    SourceLanguage,
    UnknownLanguageError,
    escape_literal,
    get_language,
)
from commitstamp.core.source_file.real import RealSourceFiles
from commitstamp.core.source_file.target import TargetFileSpec, split_type_name
from commitstamp.core.source_file.writers import (
    ConstantSite,
    ConstantSiteNotFoundError,
    LiteralSpliceWriter,
    SourceFileWriter,
    TemplateSourceWriter,
    find_constant_site,
    render_source,
    select_writer,
    splice_constant_value,
)

__all__ = [
    "SourceFiles",
    "RealSourceFiles",
    "DryRunSourceFiles",
    "SourceLanguage",
    "JAVA",
    "KOTLIN",
    "LANGUAGES",
    "UnknownLanguageError",
    "get_language",
    "TargetFileSpec",
    "split_type_name",
    "ConstantSite",
    "ConstantSiteNotFoundError",
    "SourceFileWriter",
    "TemplateSourceWriter",
    "LiteralSpliceWriter",
    "escape_literal",
    "find_constant_site",
    "render_source",
    "select_writer",
    "splice_constant_value",
]
