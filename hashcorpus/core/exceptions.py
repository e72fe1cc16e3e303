"""
Custom exception hierarchy for hashcorpus.

Every failure in corpus generation is fatal: a silently partial corpus is
worse than no corpus, so none of these exceptions are retried.
"""

from __future__ import annotations


class HashCorpusException(Exception):
    """
    Base exception for all hashcorpus errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (paths, algorithm names, etc.)
        recoverable: Whether retry/recovery may be possible
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigFileError(HashCorpusException):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors and permission errors.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(HashCorpusException, ValueError):
    """
    Invalid configuration value.

    Inherits from ValueError for callers that catch ValueError.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Digest Errors
# =============================================================================


class InitializationError(HashCorpusException):
    """
    A required digest capability cannot be constructed.

    Raised before any output is produced.
    """

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        super().__init__(message, context=ctx, cause=cause)


class DigestComputationError(HashCorpusException):
    """
    A digest capability failed on valid input or produced the wrong length.
    """

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        expected_length: int | None = None,
        actual_length: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        if expected_length is not None:
            ctx["expected_length"] = expected_length
        if actual_length is not None:
            ctx["actual_length"] = actual_length
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# I/O Errors
# =============================================================================


class CorpusIOError(HashCorpusException, OSError):
    """
    Error writing or reading corpus files.

    Inherits from OSError so callers catching OSError still see it.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Validation Errors
# =============================================================================


class HashCorpusValidationError(HashCorpusException, ValueError):
    """
    Base class for input validation errors.

    Inherits from ValueError for callers that catch ValueError.
    """

    pass


class InvalidArgumentError(HashCorpusValidationError):
    """
    Invalid command-line argument or function parameter.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


class ManifestFormatError(HashCorpusValidationError):
    """
    A manifest could not be parsed.

    Raised for column count mismatches, unknown algorithm columns and
    digests that are not lowercase hex of the expected width.
    """

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if line_number is not None:
            ctx["line_number"] = line_number
        super().__init__(message, context=ctx, cause=cause)
