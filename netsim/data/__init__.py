from .network_stats import NetworkStats

__all__ = ["NetworkStats"]
