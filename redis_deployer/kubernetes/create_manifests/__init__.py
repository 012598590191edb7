from dataclasses import dataclass
from typing import Any
from kubernetes import client

from ..models import ClusterConfig
from ..utils import validate_instance_name
from .models import ManifestArguments
from .app import get_app_labels
from .storage_class import create_storage_class
from .secret import create_secret
from .config_map import create_default_config_map, create_scripts_config_map
from .service import create_headless_service, create_cluster_service
from .stateful_set import create_stateful_set


@dataclass(frozen=True)
class ResourceSet:
    storage_class: client.V1StorageClass
    secret: client.V1Secret
    default_config_map: client.V1ConfigMap
    scripts_config_map: client.V1ConfigMap
    headless_service: client.V1Service
    service: client.V1Service
    stateful_set: client.V1StatefulSet

    def resources(self) -> list[Any]:
        return [
            self.storage_class,
            self.secret,
            self.default_config_map,
            self.scripts_config_map,
            self.headless_service,
            self.service,
            self.stateful_set,
        ]

    def manifests(self) -> list[dict[str, Any]]:
        api_client = client.ApiClient()
        return [api_client.sanitize_for_serialization(resource) for resource in self.resources()]


def build(config: ClusterConfig, name: str) -> ResourceSet:
    validate_instance_name(name)
    args = ManifestArguments(
        config=config,
        name=name,
        app_labels=get_app_labels(name),
    )

    storage_class = create_storage_class(args)
    default_config_map = create_default_config_map(args)
    scripts_config_map = create_scripts_config_map(args)
    headless_service = create_headless_service(args)

    return ResourceSet(
        storage_class=storage_class,
        secret=create_secret(args),
        default_config_map=default_config_map,
        scripts_config_map=scripts_config_map,
        headless_service=headless_service,
        service=create_cluster_service(args),
        stateful_set=create_stateful_set(
            args,
            headless_service=headless_service,
            storage_class=storage_class,
            scripts_config_map=scripts_config_map,
            default_config_map=default_config_map),
    )


def create_manifests(config: ClusterConfig, name: str) -> list[dict[str, Any]]:
    return build(config, name).manifests()
