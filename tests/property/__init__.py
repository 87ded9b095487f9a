"""Property tests for conversion and trigger ordering."""
