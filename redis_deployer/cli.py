import argparse, os, sys
from .lib.configuration import parse_bool_env_var
from .lib.hydration import hydrate_string
from .lib.yaml_tools import (
    deep_merge, dump_manifests, dump_manifests_json,
    load_existing_file, load_yaml, parse_set_overrides
)
from .kubernetes.models import ClusterConfig, validate_cluster_config
from .kubernetes.create_manifests import create_manifests

DEBUG = parse_bool_env_var('DEBUG')

def debug(message: str):
    if DEBUG:
        print(message, file=sys.stderr)

def load_cluster_config(config_file: str, overrides: list[str] | None = None, env=None) -> ClusterConfig:
    env = os.environ if env is None else env
    config_yaml = load_existing_file(config_file)

    # {{ KEY }} placeholders are filled from env
    config_hydrated = hydrate_string(config_yaml, env)
    config_loaded = load_yaml(config_hydrated)
    if not isinstance(config_loaded, dict):
        raise ValueError(f"Expected a mapping in {config_file}, found {type(config_loaded).__name__}")

    if overrides:
        config_loaded = deep_merge(config_loaded, parse_set_overrides(overrides))

    return validate_cluster_config(config_loaded)

def render(config: ClusterConfig, name: str, output_format: str = 'yaml') -> str:
    manifests = create_manifests(config, name)
    debug(f'generated {len(manifests)} manifests for {name} in namespace {config.namespace}')
    if output_format == 'json':
        return dump_manifests_json(manifests)
    return dump_manifests(manifests)

def main(argv=None):
    parser = argparse.ArgumentParser(prog='redis-deployer')
    parser.add_argument('config', help='cluster config yaml file')
    parser.add_argument('name', help='instance name, used as the prefix of every resource')
    parser.add_argument('--set', dest='overrides', action='append', default=[], metavar='KEY=VALUE',
        help='override a config value, nested keys are dot separated')
    parser.add_argument('-o', '--output', help='write manifests to this file instead of stdout')
    parser.add_argument('--format', dest='output_format', choices=['yaml', 'json'], default='yaml')
    args = parser.parse_args(argv)

    config = load_cluster_config(args.config, args.overrides)
    debug(config.model_dump_json(exclude={'redis_password'}))

    manifests_string = render(config, args.name, args.output_format)

    if args.output:
        with open(args.output, 'w') as f:
            f.write(manifests_string)
        debug(f'wrote {args.output}')
    else:
        sys.stdout.write(manifests_string)

def run():
    if DEBUG:
        main()
    else:
        try:
            main()
        # discard stack trace
        except Exception as e:
            print(f"{type(e).__name__}:", e, file=sys.stderr)
            sys.exit(1)


if __name__ == '__main__':
    run()
