"""Tests for yaml helpers and config hydration."""

import pytest
import yaml

from redis_deployer.lib.hydration import hydrate_string
from redis_deployer.lib.yaml_tools import (
    deep_merge,
    dump_manifests,
    parse_set_overrides,
    unflatten,
)


class TestDumpManifests:
    """Tests for multi document yaml output."""

    def test_documents(self):
        output = dump_manifests([{'kind': 'A'}, {'kind': 'B'}])
        assert output == '---\nkind: A\n---\nkind: B\n'
        assert list(yaml.safe_load_all(output)) == [{'kind': 'A'}, {'kind': 'B'}]

    def test_multiline_block_scalar(self):
        output = dump_manifests([{'data': {'script': 'echo a\necho b'}}])
        assert 'script: |-\n    echo a\n    echo b\n' in output
        assert yaml.safe_load(output) == {'data': {'script': 'echo a\necho b'}}

    def test_key_order_kept(self):
        output = dump_manifests([{'kind': 'A', 'apiVersion': 'v1'}])
        assert output == '---\nkind: A\napiVersion: v1\n'


class TestOverrides:
    """Tests for --set parsing and merging."""

    def test_parse(self):
        assert parse_set_overrides(['replicas=5', 'resources.limits.cpu=1', 'a=b=c']) == {
            'replicas': '5',
            'resources': {'limits': {'cpu': '1'}},
            'a': 'b=c',
        }

    @pytest.mark.parametrize('override', ['replicas', '=5'])
    def test_parse_invalid(self, override):
        with pytest.raises(ValueError):
            parse_set_overrides([override])

    def test_unflatten_conflict(self):
        with pytest.raises(ValueError):
            unflatten({'a': 1, 'a.b': 2})
        with pytest.raises(ValueError):
            unflatten({'a.b': 2, 'a': 1})

    def test_deep_merge(self):
        merged = deep_merge(
            {'replicas': 3, 'resources': {'limits': {'cpu': '2', 'memory': '1Gi'}}},
            {'replicas': '5', 'resources': {'limits': {'cpu': '1'}}})
        assert merged == {'replicas': '5', 'resources': {'limits': {'cpu': '1', 'memory': '1Gi'}}}

    def test_deep_merge_replaces_non_dicts(self):
        """A scalar override replaces a list or dict outright."""
        merged = deep_merge(
            {'announce_ips': ['1.1.1.1'], 'node_selector': {'a': 'b'}},
            {'announce_ips': '2.2.2.2', 'node_selector': 'x'})
        assert merged == {'announce_ips': '2.2.2.2', 'node_selector': 'x'}

    def test_deep_merge_does_not_mutate(self):
        base = {'resources': {'limits': {'cpu': '2'}}}
        deep_merge(base, {'resources': {'limits': {'cpu': '1'}}})
        assert base == {'resources': {'limits': {'cpu': '2'}}}


class TestHydration:
    """Tests for {{ KEY }} placeholder replacement."""

    def test_replace(self):
        assert hydrate_string('redis_password: {{ PASSWORD }}', {'PASSWORD': 'eA=='}) == 'redis_password: eA=='

    def test_missing(self):
        with pytest.raises(ValueError, match='PASSWORD'):
            hydrate_string('redis_password: {{PASSWORD}}', {})
