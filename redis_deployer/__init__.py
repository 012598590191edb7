"""
redis-deployer - Kubernetes manifest generator for password protected Redis clusters

Builds a StatefulSet backed Redis cluster with its Services, ConfigMaps,
Secret and StorageClass using kubernetes-client models.
"""

from .kubernetes.models import ClusterConfig
from .kubernetes.create_manifests import ResourceSet, build, create_manifests

__all__ = ['ClusterConfig', 'ResourceSet', 'build', 'create_manifests']
