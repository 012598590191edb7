from .models import *
from ..utils import render_redis_config
from ...lib.render_template import render_template
from kubernetes import client

def create_default_config_map(args: ManifestArguments) -> client.V1ConfigMap:
    """redis.conf seed, copied into place on first boot only"""
    return client.V1ConfigMap(
        api_version="v1",
        kind="ConfigMap",
        metadata=client.V1ObjectMeta(
            name=args.default_config_map_name,
            namespace=args.namespace,
            labels=args.labels,
        ),
        data={ DEFAULT_CONFIG_KEY: render_redis_config(args.config.redis_config) }
    )

def create_scripts_config_map(args: ManifestArguments) -> client.V1ConfigMap:
    return client.V1ConfigMap(
        api_version="v1",
        kind="ConfigMap",
        metadata=client.V1ObjectMeta(
            name=args.scripts_config_map_name,
            namespace=args.namespace,
            labels=args.labels,
        ),
        data={
            READINESS_SCRIPT_KEY: render_template(f'{READINESS_SCRIPT_KEY}.jinja'),
            LIVENESS_SCRIPT_KEY: render_template(f'{LIVENESS_SCRIPT_KEY}.jinja'),
        }
    )
