"""Runtime key compatibility registry package."""
