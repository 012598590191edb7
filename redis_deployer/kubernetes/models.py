from pydantic import BaseModel, ConfigDict, Field

DEFAULT_REDIS_IMAGE = 'docker.io/bitnami/redis-cluster:6.2.6-debian-10-r49'
DEFAULT_VOLUME_TYPE = 'gp2'
DEFAULT_VOLUME_IOPS_PER_GB = '3'
DEFAULT_VOLUME_FS_TYPE = 'ext4'

# Resource specifications, keyed by resource name (cpu, memory, ephemeral-storage, hugepages-2Mi, ...)
ResourceQuantities = dict[str, str | int]

class Resources(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

    limits: ResourceQuantities | None = None
    requests: ResourceQuantities | None = None

class Toleration(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

    key: str | None = None
    operator: str | None = None
    value: str | None = None
    effect: str | None = None
    toleration_seconds: int | None = None

# Root cluster definition
class ClusterConfig(BaseModel):
    """Options for a single redis cluster instance.

    Only the field types are validated, e.g. the length of ``announce_ips``
    is not compared against ``replicas``.
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    replicas: int = Field(default=3, ge=1)
    redis_image: str | None = None

    volume_size: str = Field(min_length=1)
    volume_type: str | None = None
    volume_iops_per_gb: str | None = None
    volume_fs_type: str | None = None

    # base64 encoded, copied into the secret as is
    redis_password: str = Field(min_length=1)

    node_selector: dict[str, str] | None = None
    tolerations: list[Toleration] | None = None
    namespace: str = Field(default='default', min_length=1)
    resources: Resources | None = None

    redis_config: list[str] | None = None
    enable_aof: str = 'yes'
    announce_ips: list[str] | None = None
    announce_replica_ip: bool = False

    kuma_mesh: bool = False
    kuma_mesh_name: str | None = None

    @property
    def image(self) -> str:
        return self.redis_image or DEFAULT_REDIS_IMAGE

    @property
    def storage_parameters(self) -> dict[str, str]:
        return {
            'type': self.volume_type or DEFAULT_VOLUME_TYPE,
            'iopsPerGB': self.volume_iops_per_gb or DEFAULT_VOLUME_IOPS_PER_GB,
            'fsType': self.volume_fs_type or DEFAULT_VOLUME_FS_TYPE,
        }

    @property
    def mesh_enabled(self) -> bool:
        return self.kuma_mesh and bool(self.kuma_mesh_name)


def validate_cluster_config(cluster_yaml: dict) -> ClusterConfig:
    return ClusterConfig.model_validate(cluster_yaml)
