"""Shared fixtures for the manifest builder tests."""

import pytest

from redis_deployer import ClusterConfig, build


@pytest.fixture
def minimal_config():
    """Config with only the required fields."""
    return ClusterConfig(volume_size='10Gi', redis_password='dGVzdA==')


@pytest.fixture
def full_config():
    """Config with every optional field set."""
    return ClusterConfig.model_validate({
        'volume_size': '10Gi',
        'replicas': 2,
        'volume_fs_type': 'ext3',
        'volume_type': 'io1',
        'volume_iops_per_gb': '100',
        'redis_image': 'test-image',
        'redis_password': 'dGVzdDI=',
        'kuma_mesh': True,
        'kuma_mesh_name': 'test-mesh',
        'enable_aof': 'no',
        'announce_ips': ['8.8.8.8', '123.123.234.4'],
        'announce_replica_ip': True,
        'node_selector': {'test': 'test'},
        'namespace': 'test',
        'tolerations': [{'key': 'test', 'operator': 'Equal', 'value': 'test'}],
        'resources': {
            'limits': {'cpu': '1', 'memory': '1Gi'},
            'requests': {'cpu': '100m'},
        },
        'redis_config': ['maxmemory 100mb', 'maxmemory-policy allkeys-lru'],
    })


@pytest.fixture
def minimal_manifests(minimal_config):
    """Serialized manifests for the minimal config, keyed by kind and name."""
    return {
        (m['kind'], m['metadata']['name']): m
        for m in build(minimal_config, 'redis').manifests()
    }


@pytest.fixture
def full_manifests(full_config):
    """Serialized manifests for the full config, keyed by kind and name."""
    return {
        (m['kind'], m['metadata']['name']): m
        for m in build(full_config, 'asd-redis').manifests()
    }
