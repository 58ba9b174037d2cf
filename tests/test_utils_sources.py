"""Tests for source reading and merging."""

import pytest

from storeconf.core.errors import SourceError
from storeconf.utils.sources import deep_merge, find_fragments, merge_sources, read_file, read_source


def test_deep_merge_nested_and_replace():
    base = {"redis": {"host": "a", "ssl_context": {"cafile": "/ca", "verify_peer_name": True}}, "tags": [1, 2]}
    override = {"redis": {"ssl_context": {"verify_peer_name": False}}, "tags": [3]}

    merged = deep_merge(base, override)

    assert merged == {
        "redis": {"host": "a", "ssl_context": {"cafile": "/ca", "verify_peer_name": False}},
        "tags": [3],
    }
    assert base["redis"]["ssl_context"]["verify_peer_name"] is True


def test_mapping_replaced_by_scalar():
    assert deep_merge({"redis": {"host": "a"}}, {"redis": None}) == {"redis": None}


def test_read_source_copies_mappings():
    source = {"redis": {"port": 6379}}

    data = read_source(source)
    data["redis"]["port"] = 1

    assert source["redis"]["port"] == 6379


def test_read_source_rejects_other_types():
    with pytest.raises(SourceError):
        read_source(42)


def test_yaml_and_unknown_suffix(tmp_path):
    yaml_file = tmp_path / "cache.yml"
    yaml_file.write_text("redis:\n  host: tls://127.0.0.1\n  port: 6379\n")
    conf_file = tmp_path / "cache.conf"
    conf_file.write_text('{"redis": {"port": 6380}}')

    assert read_file(yaml_file) == {"redis": {"host": "tls://127.0.0.1", "port": 6379}}
    assert read_file(conf_file) == {"redis": {"port": 6380}}


def test_empty_file_is_empty_mapping(tmp_path):
    empty = tmp_path / "empty.yaml"
    empty.write_text("")

    assert read_file(empty) == {}


@pytest.mark.parametrize("name, content", [
    ("broken.json", "{not json"),
    ("broken.yaml", "redis: [unclosed"),
    ("list.yaml", "- redis\n- objectstore\n"),
])
def test_unparseable_files(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content)

    with pytest.raises(SourceError) as exc_info:
        read_file(path)

    assert exc_info.value.key == str(path)


def test_missing_file(tmp_path):
    with pytest.raises(SourceError, match="not found"):
        read_file(tmp_path / "nope.json")


def test_find_fragments_sorted(tmp_path):
    for name in ("b.config.yaml", "a.config.json", "notes.txt"):
        (tmp_path / name).write_text("{}")

    assert [p.name for p in find_fragments(tmp_path)] == ["a.config.json", "b.config.yaml"]


def test_find_fragments_missing_directory(tmp_path):
    with pytest.raises(SourceError):
        find_fragments(tmp_path / "absent")


def test_merge_sources_mixes_paths_and_mappings(tmp_path):
    path = tmp_path / "base.yaml"
    path.write_text("redis:\n  host: redis\n  port: 6379\n")

    assert merge_sources([path, {"redis": {"port": 6380}}]) == {"redis": {"host": "redis", "port": 6380}}


def test_find_fragments_skips_unsupported_suffixes(tmp_path):
    (tmp_path / "preset.config.json").write_text("{}")
    (tmp_path / "preset.config.php").write_text("<?php\n$CONFIG = json_decode(file_get_contents(__DIR__ . '/preset.config.json'), true);\n")
    (tmp_path / "tls.config.yml").write_text("{}")

    assert [p.name for p in find_fragments(tmp_path)] == ["preset.config.json", "tls.config.yml"]
