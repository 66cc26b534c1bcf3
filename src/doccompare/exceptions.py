#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the doccompare library.

This module defines specialized exception classes for the error conditions
that can occur while validating sources, extracting lines and comparing
documents. All of them are raised before any comparison work starts, so a
caller never receives a partially computed change set.

Exception Hierarchy
-------------------
- DocCompareError (base exception)

  - ValidationError (parameter/option validation)
    - IdenticalInputsError (original and modified are the same source)

  - FileError (file access and I/O)
    - SourceNotFoundError (file doesn't exist)
    - MalformedFileError (corrupted/unreadable document)

  - FormatError (source kind problems)
    - TypeMismatchError (sources of different kinds)
    - UnsupportedKindError (extension is not a recognized kind)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class DocCompareError(Exception):
    """Base exception class for all doccompare-specific errors.

    Catching this will catch every library-specific error.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(DocCompareError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class IdenticalInputsError(ValidationError):
    """Exception raised when the original and modified sources are the same file.

    Parameters
    ----------
    file_path : str
        The path given for both sources
    message : str, optional
        Custom error message

    """

    def __init__(self, file_path: str, message: str | None = None):
        """Initialize the identical inputs error."""
        if message is None:
            message = f"File paths are the same: {file_path}"
        super().__init__(message, parameter_name="modified", parameter_value=file_path)
        self.file_path = file_path


class FileError(DocCompareError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class SourceNotFoundError(FileError):
    """Exception raised when a source file cannot be found.

    Parameters
    ----------
    file_path : str
        Path to the file that was not found
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the source not found error."""
        if message is None:
            message = f"Following file not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class MalformedFileError(FileError):
    """Exception raised when a document cannot be opened or read.

    Raised by the extractors for corrupt, locked or otherwise unreadable
    documents. The comparison layer never translates it.

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the malformed file error."""
        super().__init__(message, file_path=file_path, original_error=original_error)


class FormatError(DocCompareError):
    """Exception raised for source kind problems.

    Parameters
    ----------
    message : str
        Description of the format error
    format_type : str, optional
        The offending format (usually a file extension)
    supported_formats : list[str], optional
        List of supported formats for reference
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        format_type: str | None = None,
        supported_formats: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        super().__init__(message, original_error=original_error)
        self.format_type = format_type
        self.supported_formats = supported_formats


class TypeMismatchError(FormatError):
    """Exception raised when the two sources are of different kinds.

    Parameters
    ----------
    original_type : str
        Extension of the original source
    modified_type : str
        Extension of the modified source

    """

    def __init__(self, original_type: str, modified_type: str, message: str | None = None):
        """Initialize the type mismatch error."""
        if message is None:
            message = f"Files type aren't equal: '{original_type}' and '{modified_type}'"
        super().__init__(message, format_type=modified_type)
        self.original_type = original_type
        self.modified_type = modified_type


class UnsupportedKindError(FormatError):
    """Exception raised when a source's extension is not a recognized kind."""

    def __init__(self, format_type: str, supported_formats: list[str] | None = None, message: str | None = None):
        """Initialize the unsupported kind error."""
        if message is None:
            message = f"Unknown file format: '{format_type or '<none>'}'"
            if supported_formats:
                message += f". Supported formats: {', '.join(supported_formats)}"
        super().__init__(message, format_type=format_type, supported_formats=supported_formats)


class DependencyError(DocCompareError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the extractor requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The first ImportError encountered

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{converter_name.upper()} format requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{converter_name.upper()} format has version mismatches: {mismatch_str}")

            message = "\n".join(message_parts)

            if install_command:
                message += f"\nInstall with: {install_command}"
            else:
                all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
                if all_packages:
                    packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                    message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command


__all__ = [
    "DocCompareError",
    "ValidationError",
    "IdenticalInputsError",
    "FileError",
    "SourceNotFoundError",
    "MalformedFileError",
    "FormatError",
    "TypeMismatchError",
    "UnsupportedKindError",
    "DependencyError",
]
