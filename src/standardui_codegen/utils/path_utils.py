"""Path utilities for generated source files."""

SOURCE_FILE_EXTENSION = ".cs"


def create_source_filename(class_name: str, extension: str = SOURCE_FILE_EXTENSION) -> str:
    """Create the source file name for a class or declaration.

    C# identifiers are valid file names as-is; the name is kept verbatim so
    distinct classes never share a file.
    """
    return f"{class_name}{extension}"
