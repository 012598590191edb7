import yaml, os, json
from typing import Any

class ManifestDumper(yaml.SafeDumper):
    def ignore_aliases(self, data):
        return True

def represent_none(dumper, _):
    return dumper.represent_scalar('tag:yaml.org,2002:null', '')

def _represent_str(dumper, data):
    """
        configures yaml for dumping multiline strings (scripts, redis config) as block scalars
        Ref: https://stackoverflow.com/questions/8640959/how-can-i-control-what-scalar-form-pyyaml-uses-for-my-data

        Trailing newlines are left alone so the contents of the string are never changed.
    """

    if data.count('\n') > 0:
        return dumper.represent_scalar('tag:yaml.org,2002:str', data, style='|')
    return dumper.represent_scalar('tag:yaml.org,2002:str', data)

ManifestDumper.add_representer(type(None), represent_none)
ManifestDumper.add_representer(str, _represent_str)

def dump_manifests(manifests: list[dict[str, Any]]) -> str:
    manifests_string = ''
    for manifest in manifests:
        manifests_string += '---\n'
        manifests_string += yaml.dump(manifest, Dumper=ManifestDumper, default_flow_style=False, sort_keys=False)
    return manifests_string

def dump_manifests_json(manifests: list[dict[str, Any]]) -> str:
    return json.dumps(manifests, indent=2) + '\n'

def unflatten(flat: dict[str, Any], sep: str = ".") -> dict[str, Any]:
    """expands dotted keys into nested dicts, a key that is both a value and a parent is an error"""
    result: dict[str, Any] = {}
    for key, value in flat.items():
        parts = key.split(sep)
        current = result
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            elif not isinstance(current[part], dict):
                raise ValueError(f"Conflict at {'.'.join(parts[:-1])}")
            current = current[part]
        leaf = parts[-1]
        if leaf in current:
            raise ValueError(f"Conflict at {key}")
        current[leaf] = value
    return result

def parse_set_overrides(overrides: list[str]) -> dict[str, Any]:
    """turns ['a.b=1', 'c=x'] into {'a': {'b': '1'}, 'c': 'x'}"""
    flat: dict[str, Any] = {}
    for override in overrides:
        if '=' not in override:
            raise ValueError(f"Invalid override, expected key=value: {override}")
        key, value = override.split('=', 1)
        key = key.strip()
        if not key:
            raise ValueError(f"Invalid override, empty key: {override}")
        flat[key] = value
    return unflatten(flat)

def load_existing_file(fn):
    if os.path.isfile(fn):
        with open(fn, 'r') as f:
            return f.read()
    raise ValueError(f"Could not find file {fn}")

def load_yaml(data: str) -> Any:
    loaded = yaml.safe_load(data)
    return {} if loaded is None else loaded

# deep merge two dictionaries created from yaml
# dicts are merged recursively, anything else from d2 replaces the value in d1
def deep_merge(d1, d2):
    result = d1.copy()
    for k, v in d2.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = deep_merge(result[k], v)
        else:
            result[k] = v
    return result
