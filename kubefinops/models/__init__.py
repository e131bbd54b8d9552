"""Pydantic models for KubeFinOps."""
