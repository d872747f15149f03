"""Language specific generators."""
