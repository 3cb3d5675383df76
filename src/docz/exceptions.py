#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the docz library.

This module defines the exception classes raised at each stage of the
documentation pipeline. Every stage either succeeds completely or fails with
exactly one typed error, so callers can tell which boundary was crossed.

Exception Hierarchy
-------------------
- DoczError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a parser or renderer)

  - ParseError (malformed source input)
    - FrontmatterError (unterminated or invalid frontmatter block)

  - ProcessError (a processor could not complete its transformation)

  - RenderError (output generation failures)
    - UnsupportedNodeError (node variant the renderer cannot represent)

  - ConfigError (missing or invalid doc.toml)

  - FormatError (unknown format id or file extension)

  - DependencyError (missing/incompatible packages)

  - BuildError (a pipeline stage failed for one file or output format)

"""

from __future__ import annotations

from typing import Any


class DoczError(Exception):
    """Base exception class for all docz-specific errors.

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


class ValidationError(DoczError):
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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received

    """

    def __init__(self, converter_name: str, expected_type: type, received_type: type):
        """Initialize with the converter name and the mismatching types."""
        message = (
            f"Invalid options type for '{converter_name}': expected {expected_type.__name__}, "
            f"got {received_type.__name__}"
        )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParseError(DoczError):
    """Exception raised when source input cannot be parsed.

    The message carries the offending line and column when the parser knows
    them, formatted as ``"<message> (line L, column C)"``.

    Parameters
    ----------
    message : str
        Description of the problem
    line : int, optional
        1-based line of the offending input
    column : int, optional
        1-based column of the offending input
    source : str, optional
        Name of the source (usually a file path)
    original_error : Exception, optional
        The underlying library error

    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        source: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the parse error with position details."""
        location = []
        if line is not None:
            location.append(f"line {line}")
        if column is not None:
            location.append(f"column {column}")
        full_message = message
        if location:
            full_message = f"{message} ({', '.join(location)})"
        if source:
            full_message = f"{source}: {full_message}"
        super().__init__(full_message, original_error=original_error)
        self.line = line
        self.column = column
        self.source = source


class FrontmatterError(ParseError):
    """Exception raised for an unterminated or invalid frontmatter block."""

    pass


class ProcessError(DoczError):
    """Exception raised when a processor cannot complete its transformation.

    Parameters
    ----------
    message : str
        Description of the failure
    processor : str, optional
        Name of the failing processor
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, processor: str | None = None, original_error: Exception | None = None):
        """Initialize the process error with the processor name."""
        if processor:
            message = f"{processor}: {message}"
        super().__init__(message, original_error=original_error)
        self.processor = processor


class RenderError(DoczError):
    """Exception raised when output generation fails.

    Parameters
    ----------
    message : str
        Description of the failure
    node_type : str, optional
        Variant of the node being rendered when the failure happened
    rendering_stage : str, optional
        Stage where rendering failed (e.g., "rendering", "encoding")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        node_type: str | None = None,
        rendering_stage: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the render error with stage information."""
        super().__init__(message, original_error=original_error)
        self.node_type = node_type
        self.rendering_stage = rendering_stage


class UnsupportedNodeError(RenderError):
    """Exception raised when a renderer meets a node variant it cannot represent.

    Parameters
    ----------
    node_type : str
        Variant name of the unsupported node
    renderer : str
        Name of the renderer

    """

    def __init__(self, node_type: str, renderer: str):
        """Initialize with the variant and renderer names."""
        super().__init__(
            f"{node_type} nodes are not supported by {renderer}", node_type=node_type, rendering_stage="rendering"
        )
        self.renderer = renderer


class ConfigError(DoczError):
    """Exception raised for a missing or invalid configuration file.

    Parameters
    ----------
    message : str
        Description of the problem
    path : str, optional
        Path of the configuration file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, path: str | None = None, original_error: Exception | None = None):
        """Initialize the config error with the offending path."""
        if path:
            message = f"{message}: {path}"
        super().__init__(message, original_error=original_error)
        self.path = path


class FormatError(DoczError):
    """Exception raised for an unknown format id or unsupported file extension.

    Parameters
    ----------
    message : str
        Description of the problem
    format_id : str, optional
        The format id or extension that could not be resolved

    """

    def __init__(self, message: str, format_id: str | None = None):
        """Initialize the format error."""
        super().__init__(message)
        self.format_id = format_id


class DependencyError(DoczError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the converter requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    original_import_error : ImportError, optional
        The import error raised for a missing package

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        message_parts = []
        if missing_packages:
            pkg_list = ", ".join(f"'{name}{spec}'" for name, spec in missing_packages)
            message_parts.append(f"{converter_name.upper()} format requires the following packages: {pkg_list}")
        if version_mismatches:
            mismatch_str = ", ".join(
                f"'{name}' (requires {required}, but {installed} is installed)"
                for name, required, installed in version_mismatches
            )
            message_parts.append(f"{converter_name.upper()} format has version mismatches: {mismatch_str}")

        all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
        message = "\n".join(message_parts)
        if all_packages:
            packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
            message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches


class BuildError(DoczError):
    """Exception raised when a pipeline stage fails during a build.

    Parameters
    ----------
    message : str
        Description of the failure
    file : str, optional
        Source file being processed
    stage : str, optional
        Pipeline stage: "load", "parse", "process", "render" or "write"
    format_id : str, optional
        Output format being rendered
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        file: str | None = None,
        stage: str | None = None,
        format_id: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the build error with its location in the pipeline."""
        context = []
        if stage:
            context.append(f"stage={stage}")
        if file:
            context.append(f"file={file}")
        if format_id:
            context.append(f"format={format_id}")
        if context:
            message = f"[{' '.join(context)}] {message}"
        super().__init__(message, original_error=original_error)
        self.file = file
        self.stage = stage
        self.format_id = format_id
