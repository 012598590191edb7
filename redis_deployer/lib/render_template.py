from jinja2 import Environment, FileSystemLoader, StrictUndefined
import os
import shlex

def setup_filters(env):
    env.filters['shell_quote'] = shlex.quote

_jinja_env = None
def get_jinja():
    global _jinja_env
    if _jinja_env is None:
        templates_path = os.path.join(os.path.dirname(__file__), '..', 'templates')
        # shell scripts: block tags must not leave blank lines or indentation behind
        env = Environment(
            loader=FileSystemLoader(templates_path),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True)
        setup_filters(env)
        _jinja_env = env
    return _jinja_env

def render_template(template: str, **kwargs):
    template_text = get_jinja().get_template(template)
    return template_text.render(**kwargs)
