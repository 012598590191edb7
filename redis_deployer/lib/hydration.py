import re
from typing import Mapping

# replace {{ KEY }} with VALUE from env
def hydrate_string(s: str, env: Mapping[str, str]):
    def rpl(match):
        k = match.group(1).strip()
        if k not in env:
            raise ValueError(f"Missing value for variable: {k}")
        return env[k]
    p = re.compile(r"{{\s*([^{}\s]+)\s*}}")
    return re.sub(p, rpl, s)
