"""Site Manifest - Content-addressed manifests of built site directories."""

__version__ = "0.1.0"

# Directory and environment constants
DEFAULT_ROOT = "_site"
GIT_DIR = ".git"
ENV_PREFIX = "SITE_MANIFEST_"
