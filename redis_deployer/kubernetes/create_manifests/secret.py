from .models import ManifestArguments, PASSWORD_SECRET_KEY
from kubernetes import client

def create_secret(args: ManifestArguments) -> client.V1Secret:
    return client.V1Secret(
        api_version="v1",
        kind="Secret",
        type="Opaque",
        metadata=client.V1ObjectMeta(
            name=args.name,
            namespace=args.namespace,
            labels=args.labels,
        ),
        data={ PASSWORD_SECRET_KEY: args.config.redis_password }
    )

def password_env_var(args: ManifestArguments, env_name: str) -> client.V1EnvVar:
    return client.V1EnvVar(
        name=env_name,
        value_from=client.V1EnvVarSource(
            secret_key_ref=client.V1SecretKeySelector(
                name=args.name,
                key=PASSWORD_SECRET_KEY
            )
        )
    )
