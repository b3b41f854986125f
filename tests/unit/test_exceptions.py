#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the exception hierarchy."""

import pytest

from atlwiki.exceptions import (
    AtlWikiError,
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from atlwiki.options import AtlassianRendererOptions, BaseRendererOptions


@pytest.mark.unit
class TestExceptionHierarchy:
    """Tests for exception classes."""

    def test_hierarchy(self) -> None:
        """Test that all library errors derive from AtlWikiError."""
        assert issubclass(ValidationError, AtlWikiError)
        assert issubclass(InvalidOptionsError, ValidationError)
        assert issubclass(RenderingError, AtlWikiError)
        assert issubclass(OutputWriteError, RenderingError)

    def test_original_error_kept(self) -> None:
        """Test that wrapped errors are accessible."""
        cause = ValueError("bad")
        error = AtlWikiError("failed", original_error=cause)
        assert error.original_error is cause
        assert str(error) == "failed"

    def test_invalid_options_message(self) -> None:
        """Test the generated message for wrong options classes."""
        error = InvalidOptionsError("atlassian", AtlassianRendererOptions, BaseRendererOptions)

        assert "AtlassianRendererOptions" in error.message
        assert "BaseRendererOptions" in error.message
        assert error.parameter_name == "options"
        assert error.received_type is BaseRendererOptions

    def test_rendering_error_fields(self) -> None:
        """Test rendering stage and partial output."""
        error = RenderingError("walk failed", rendering_stage="walk", partial_output="h1.")
        assert error.rendering_stage == "walk"
        assert error.partial_output == "h1."

    def test_output_write_error_defaults(self) -> None:
        """Test default stage and message of OutputWriteError."""
        error = OutputWriteError(file_path="/tmp/out.wiki")
        assert error.rendering_stage == "file_write"
        assert "/tmp/out.wiki" in error.message
        assert OutputWriteError().message == "Failed to write output"
