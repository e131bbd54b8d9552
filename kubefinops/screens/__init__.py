"""Screens for KubeFinOps."""
