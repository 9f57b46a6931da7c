"""
Application constants and metadata.
"""

# Application info
APP_NAME = "nginx-discovery"
APP_VERSION = "0.1.0"

# Default values
DEFAULT_CONFIG_PATH = "/etc/nginx/nginx.conf"
DEFAULT_SNIPPET_CONTEXT = 0
