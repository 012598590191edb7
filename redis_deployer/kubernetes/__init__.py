from .models import ClusterConfig, validate_cluster_config

__all__ = ['ClusterConfig', 'validate_cluster_config']
