"""
Pytest configuration and fixtures.
"""

from pathlib import Path

import pytest


FULL_CONFIG = """\
user nginx;
worker_processes auto;

events {
    worker_connections 1024;
}

http {
    include /etc/nginx/mime.types;

    log_format main '$remote_addr - $remote_user [$time_local]';
    access_log /var/log/nginx/access.log main buffer=32k;

    upstream backend {
        server localhost:8080;  # primary
    }

    server {
        listen 80;
        server_name example.com www.example.com;

        location / {
            proxy_pass http://backend;
            proxy_set_header Host $host;
        }
    }
}
"""


@pytest.fixture
def full_config() -> str:
    """A realistic configuration covering blocks, strings, variables and comments."""
    return FULL_CONFIG


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """The full configuration written to a temporary file."""
    path = tmp_path / "nginx.conf"
    path.write_text(FULL_CONFIG, encoding="utf-8")
    return path
