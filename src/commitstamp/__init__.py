"""Stamp the current git commit id into build properties and source constants."""
