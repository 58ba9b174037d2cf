"""
Pytest configuration and shared configuration fragments.

Ensures the repo root is on sys.path so that 'import storeconf' works
without an install.
"""
import copy
import json
import sys
from pathlib import Path

import pytest
import yaml

repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

REDIS_TLS_FRAGMENT = {
    "redis": {
        "host": "tls://127.0.0.1",
        "port": 6379,
        "ssl_context": {
            "local_cert": "/redis-certificates/client.crt",
            "local_pk": "/redis-certificates/client.key",
            "cafile": "/redis-certificates/ca.crt",
            "verify_peer_name": False,
        },
    },
}

SWIFT_FRAGMENT = {
    "objectstore": {
        "class": "OC\\Files\\ObjectStore\\Swift",
        "arguments": {
            "bucket": "nextcloud",
            "autocreate": True,
            "user": {
                "name": "swift",
                "password": "swift",
                "domain": {"name": "default"},
            },
            "scope": {
                "project": {
                    "name": "service",
                    "domain": {"name": "default"},
                },
            },
            "tenantName": "service",
            "region": "regionOne",
            "url": "http://keystone:5000/v3",
            "serviceName": "swift",
        },
    },
}

S3_FRAGMENT = {
    "objectstore": {
        "backend": "s3",
        "bucket": "ext",
        "key": "minio",
        "secret": "minio123",
        "hostname": "s3",
        "port": 9000,
        "use_ssl": False,
        "use_path_style": True,
    },
}


@pytest.fixture
def redis_fragment():
    return copy.deepcopy(REDIS_TLS_FRAGMENT)


@pytest.fixture
def swift_fragment():
    return copy.deepcopy(SWIFT_FRAGMENT)


@pytest.fixture
def s3_fragment():
    return copy.deepcopy(S3_FRAGMENT)


@pytest.fixture
def fragment_dir(tmp_path):
    """Directory holding the cache fragment as YAML and the Swift one as JSON"""
    (tmp_path / "redis.config.yaml").write_text(yaml.safe_dump(REDIS_TLS_FRAGMENT))
    (tmp_path / "swift.config.json").write_text(json.dumps(SWIFT_FRAGMENT))
    return tmp_path
