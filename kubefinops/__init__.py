"""KubeFinOps - per-container resource utilization for Kubernetes workloads."""

__version__ = "0.1.0"
