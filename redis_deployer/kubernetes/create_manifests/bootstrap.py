from .models import ManifestArguments
from ...lib.render_template import render_template

REDIS_CONFIG_DIR = '/opt/bitnami/redis/etc/'
REDIS_CONFIG_PATH = '/opt/bitnami/redis/etc/redis.conf'
REDIS_DEFAULT_CONFIG_PATH = '/opt/bitnami/redis/etc/redis-default.conf'
REDIS_ENTRYPOINT = '/opt/bitnami/scripts/redis-cluster/entrypoint.sh'
REDIS_RUN_SCRIPT = '/opt/bitnami/scripts/redis-cluster/run.sh'

BOOTSTRAP_COMMAND = ['/bin/bash', '-c']

def create_bootstrap_script(args: ManifestArguments) -> str:
    """
    Script run as the redis container's command.

    Seeds redis.conf from the default config map on first boot, then picks the
    node role from the pod ordinal (the last '-' separated part of the pod
    name). Ordinal 0 creates the cluster.
    """
    return render_template('bootstrap.sh.jinja',
        config_path=REDIS_CONFIG_PATH,
        default_config_path=REDIS_DEFAULT_CONFIG_PATH,
        announce_ips=args.config.announce_ips,
        announce_replica_ip=args.config.announce_replica_ip,
        entrypoint=REDIS_ENTRYPOINT,
        run_script=REDIS_RUN_SCRIPT)
