import re

# services need rfc 1035 labels
INSTANCE_NAME_PATTERN = re.compile(r'^[a-z]([-a-z0-9]*[a-z0-9])?$')
# leaves room for the -headless service and the statefulset's controller-revision-hash label
INSTANCE_NAME_MAX_LENGTH = 52

def coerce_dns_name(s: str) -> str:
    s = s.lower()
    s = re.sub(r'[^a-z0-9-]', '-', s)
    s = re.sub(r'-+', '-', s)
    s = s.strip('-')
    s = s.lstrip('0123456789-')
    s = s[:INSTANCE_NAME_MAX_LENGTH]
    s = s.strip('-')
    return s

def validate_instance_name(name: str) -> str:
    if len(name) > INSTANCE_NAME_MAX_LENGTH:
        raise ValueError(f"Invalid instance name '{name}', at most {INSTANCE_NAME_MAX_LENGTH} characters are allowed")
    if not INSTANCE_NAME_PATTERN.match(name):
        raise ValueError(f"Invalid instance name '{name}', expected a dns label starting with a letter such as '{coerce_dns_name(name) or 'redis'}'")
    return name

def get_redis_nodes(replicas: int, name: str) -> str:
    """space separated pod host names, ordinal 0 first"""
    return ' '.join(f'{name}-{i}.{name}-headless' for i in range(replicas))

def render_redis_config(lines: list[str] | None) -> str:
    if not lines:
        return ''
    return '\n'.join(lines)
