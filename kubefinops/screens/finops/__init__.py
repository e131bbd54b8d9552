"""FinOps screen: per-container utilization gauges for one workload."""
