from dataclasses import dataclass
from ..models import ClusterConfig

APP_SELECTOR_NAME = 'app'

REDIS_PORT = 6379
REDIS_BUS_PORT = 16379
REDIS_PORT_NAME = 'tcp-redis'
REDIS_BUS_PORT_NAME = 'tcp-redis-bus'

PASSWORD_SECRET_KEY = 'redis-password'
DEFAULT_CONFIG_KEY = 'redis-default.conf'
READINESS_SCRIPT_KEY = 'ping_readiness_local.sh'
LIVENESS_SCRIPT_KEY = 'ping_liveness_local.sh'

STORAGE_PROVISIONER = 'kubernetes.io/aws-ebs'

KUMA_SIDECAR_INJECTION_ANNOTATION = 'kuma.io/sidecar-injection'
KUMA_MESH_ANNOTATION = 'kuma.io/mesh'

@dataclass
class ManifestArguments:
    config: ClusterConfig
    name: str
    app_labels: dict[str, str]

    @property
    def labels(self) -> dict[str, str]:
        """fresh copy for each object's metadata"""
        return dict(self.app_labels)

    @property
    def namespace(self) -> str:
        return self.config.namespace

    @property
    def headless_service_name(self) -> str:
        return f'{self.name}-headless'

    @property
    def default_config_map_name(self) -> str:
        return f'{self.name}-default'

    @property
    def scripts_config_map_name(self) -> str:
        return f'{self.name}-scripts'

    @property
    def selector(self) -> dict[str, str]:
        return { APP_SELECTOR_NAME: self.app_labels[APP_SELECTOR_NAME] }
