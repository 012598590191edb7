from .models import *
from .bootstrap import (
    create_bootstrap_script, BOOTSTRAP_COMMAND,
    REDIS_CONFIG_DIR, REDIS_DEFAULT_CONFIG_PATH
)
from .secret import password_env_var
from ..utils import get_redis_nodes
from kubernetes import client

REDIS_USER_ID = 1001
DATA_VOLUME_NAME = 'redis-data'
DATA_MOUNT_PATH = '/bitnami/redis/data'
SCRIPTS_VOLUME_NAME = 'scripts'
SCRIPTS_MOUNT_PATH = '/scripts'
DEFAULT_CONFIG_VOLUME_NAME = 'default-config'
CONFIG_VOLUME_NAME = 'redis-tmp-conf'

def get_pod_annotations(args: ManifestArguments) -> dict[str, str]:
    # injection is always set explicitly, enabled or disabled
    if args.config.mesh_enabled:
        assert args.config.kuma_mesh_name is not None
        return {
            KUMA_SIDECAR_INJECTION_ANNOTATION: 'enabled',
            KUMA_MESH_ANNOTATION: args.config.kuma_mesh_name,
        }
    return { KUMA_SIDECAR_INJECTION_ANNOTATION: 'disabled' }

def field_env_var(name: str, field_path: str) -> client.V1EnvVar:
    return client.V1EnvVar(
        name=name,
        value_from=client.V1EnvVarSource(
            field_ref=client.V1ObjectFieldSelector(field_path=field_path)
        )
    )

def create_env(args: ManifestArguments) -> list[client.V1EnvVar]:
    return [
        field_env_var('POD_NAME', 'metadata.name'),
        client.V1EnvVar(name='REDIS_NODES', value=get_redis_nodes(args.config.replicas, args.name)),
        password_env_var(args, 'REDISCLI_AUTH'),
        password_env_var(args, 'REDIS_PASSWORD'),
        client.V1EnvVar(name='REDIS_AOF_ENABLED', value=args.config.enable_aof),
        client.V1EnvVar(name='REDIS_TLS_ENABLED', value='no'),
        client.V1EnvVar(name='REDIS_PORT', value=str(REDIS_PORT)),
        field_env_var('POD_IP', 'status.podIP'),
    ]

def create_probe(script: str, timeout_seconds: int) -> client.V1Probe:
    return client.V1Probe(
        initial_delay_seconds=5,
        period_seconds=5,
        timeout_seconds=timeout_seconds,
        success_threshold=1,
        failure_threshold=5,
        _exec=client.V1ExecAction(command=['sh', '-c', script])
    )

def create_resources(args: ManifestArguments) -> client.V1ResourceRequirements | None:
    resources = args.config.resources
    if resources is None:
        return None
    resources_dict = {}
    if resources.limits:
        resources_dict['limits'] = dict(resources.limits)
    if resources.requests:
        resources_dict['requests'] = dict(resources.requests)
    return client.V1ResourceRequirements(**resources_dict) if resources_dict else None

def create_tolerations(args: ManifestArguments) -> list[client.V1Toleration] | None:
    if args.config.tolerations is None:
        return None
    return [client.V1Toleration(**toleration.model_dump()) for toleration in args.config.tolerations]

def create_container(args: ManifestArguments) -> client.V1Container:
    return client.V1Container(
        name=args.name,
        image=args.config.image,
        image_pull_policy='IfNotPresent',
        security_context=client.V1SecurityContext(
            run_as_non_root=True,
            run_as_user=REDIS_USER_ID,
        ),
        command=BOOTSTRAP_COMMAND,
        args=[create_bootstrap_script(args)],
        env=create_env(args),
        ports=[
            client.V1ContainerPort(name=REDIS_PORT_NAME, container_port=REDIS_PORT),
            client.V1ContainerPort(name=REDIS_BUS_PORT_NAME, container_port=REDIS_BUS_PORT),
        ],
        liveness_probe=create_probe(f'{SCRIPTS_MOUNT_PATH}/{LIVENESS_SCRIPT_KEY} 5', 6),
        readiness_probe=create_probe(f'{SCRIPTS_MOUNT_PATH}/{READINESS_SCRIPT_KEY} 1', 2),
        resources=create_resources(args),
        volume_mounts=[
            client.V1VolumeMount(name=SCRIPTS_VOLUME_NAME, mount_path=SCRIPTS_MOUNT_PATH),
            client.V1VolumeMount(name=DATA_VOLUME_NAME, mount_path=DATA_MOUNT_PATH),
            client.V1VolumeMount(
                name=DEFAULT_CONFIG_VOLUME_NAME,
                mount_path=REDIS_DEFAULT_CONFIG_PATH,
                sub_path=DEFAULT_CONFIG_KEY
            ),
            client.V1VolumeMount(name=CONFIG_VOLUME_NAME, mount_path=REDIS_CONFIG_DIR),
        ]
    )

def create_volumes(args: ManifestArguments, scripts_config_map: client.V1ConfigMap, default_config_map: client.V1ConfigMap) -> list[client.V1Volume]:
    assert scripts_config_map.metadata is not None and default_config_map.metadata is not None
    return [
        client.V1Volume(
            name=SCRIPTS_VOLUME_NAME,
            config_map=client.V1ConfigMapVolumeSource(
                name=scripts_config_map.metadata.name,
                default_mode=0o755
            )
        ),
        client.V1Volume(
            name=DEFAULT_CONFIG_VOLUME_NAME,
            config_map=client.V1ConfigMapVolumeSource(
                name=default_config_map.metadata.name
            )
        ),
        client.V1Volume(
            name=CONFIG_VOLUME_NAME,
            empty_dir=client.V1EmptyDirVolumeSource()
        ),
    ]

def create_affinity(args: ManifestArguments) -> client.V1Affinity:
    # spread replicas across nodes when possible
    return client.V1Affinity(
        pod_anti_affinity=client.V1PodAntiAffinity(
            preferred_during_scheduling_ignored_during_execution=[client.V1WeightedPodAffinityTerm(
                weight=1,
                pod_affinity_term=client.V1PodAffinityTerm(
                    label_selector=client.V1LabelSelector(match_labels=args.selector),
                    namespaces=[args.namespace],
                    topology_key='kubernetes.io/hostname'
                )
            )]
        )
    )

def create_stateful_set(
        args: ManifestArguments,
        headless_service: client.V1Service,
        storage_class: client.V1StorageClass,
        scripts_config_map: client.V1ConfigMap,
        default_config_map: client.V1ConfigMap) -> client.V1StatefulSet:
    assert headless_service.metadata is not None and storage_class.metadata is not None

    pod_template = client.V1PodTemplateSpec(
        metadata=client.V1ObjectMeta(
            labels=args.labels,
            annotations=get_pod_annotations(args)
        ),
        spec=client.V1PodSpec(
            security_context=client.V1PodSecurityContext(
                fs_group=REDIS_USER_ID,
                run_as_user=REDIS_USER_ID,
                sysctls=[]
            ),
            service_account_name='default',
            affinity=create_affinity(args),
            containers=[create_container(args)],
            node_selector=args.config.node_selector,
            tolerations=create_tolerations(args),
            volumes=create_volumes(args, scripts_config_map, default_config_map),
        )
    )

    volume_claim_template = client.V1PersistentVolumeClaim(
        metadata=client.V1ObjectMeta(
            name=DATA_VOLUME_NAME,
            labels=args.labels,
        ),
        spec=client.V1PersistentVolumeClaimSpec(
            access_modes=["ReadWriteOnce"],
            storage_class_name=storage_class.metadata.name,
            resources=client.V1VolumeResourceRequirements(
                requests={ "storage": args.config.volume_size }
            )
        )
    )

    return client.V1StatefulSet(
        api_version='apps/v1',
        kind='StatefulSet',
        metadata=client.V1ObjectMeta(
            name=args.name,
            namespace=args.namespace,
            labels=args.labels,
        ),
        spec=client.V1StatefulSetSpec(
            replicas=args.config.replicas,
            service_name=headless_service.metadata.name,
            pod_management_policy='Parallel',
            update_strategy=client.V1StatefulSetUpdateStrategy(
                type='RollingUpdate',
                rolling_update=client.V1RollingUpdateStatefulSetStrategy(partition=0)
            ),
            selector=client.V1LabelSelector(match_labels=args.selector),
            template=pod_template,
            volume_claim_templates=[volume_claim_template],
        )
    )
