from .models import *
from kubernetes import client

def create_headless_service(args: ManifestArguments) -> client.V1Service:
    """per pod dns records, used for cluster discovery and by the statefulset"""
    return client.V1Service(
        api_version="v1",
        kind="Service",
        metadata=client.V1ObjectMeta(
            name=args.headless_service_name,
            namespace=args.namespace,
            labels=args.labels,
        ),
        spec=client.V1ServiceSpec(
            type='ClusterIP',
            cluster_ip='None',
            publish_not_ready_addresses=True,
            selector=args.selector,
            ports=[
                client.V1ServicePort(
                    name=REDIS_PORT_NAME,
                    port=REDIS_PORT,
                    target_port=REDIS_PORT_NAME,
                ),
                client.V1ServicePort(
                    name=REDIS_BUS_PORT_NAME,
                    port=REDIS_BUS_PORT,
                    target_port=REDIS_BUS_PORT_NAME,
                ),
            ]
        )
    )

def create_cluster_service(args: ManifestArguments) -> client.V1Service:
    return client.V1Service(
        api_version="v1",
        kind="Service",
        metadata=client.V1ObjectMeta(
            name=args.name,
            namespace=args.namespace,
            labels=args.labels,
        ),
        spec=client.V1ServiceSpec(
            type='ClusterIP',
            selector=args.selector,
            ports=[client.V1ServicePort(
                name=REDIS_PORT_NAME,
                port=REDIS_PORT,
                target_port=REDIS_PORT_NAME,
                protocol='TCP',
            )]
        )
    )
