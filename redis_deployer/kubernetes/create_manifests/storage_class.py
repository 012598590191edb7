from .models import ManifestArguments, STORAGE_PROVISIONER
from kubernetes import client

def create_storage_class(args: ManifestArguments) -> client.V1StorageClass:
    # cluster scoped, so no namespace
    return client.V1StorageClass(
        api_version='storage.k8s.io/v1',
        kind='StorageClass',
        metadata=client.V1ObjectMeta(
            name=args.name,
            labels=args.labels,
        ),
        provisioner=STORAGE_PROVISIONER,
        parameters=args.config.storage_parameters,
    )
