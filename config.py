"""Shared configuration constants for wpdev-bootstrap.

Centralizes file names, the template source and validation rules used by modules.
"""

TEMPLATE_ARCHIVE_URL = (
    "https://github.com/timoshka-lab/docker-dev-wordpress/archive/main.tar.gz"
)
BOOTSTRAP_SCRIPT = "setup.sh"

ENV_FILE = ".env"
ENV_TEMPLATE_FILE = ".env.example"
SECRETS_FILE = ".env.secrets"
VERSION_MARKER_FILE = ".version"

REQUIRED_DEPENDENCIES = ("docker", "curl", "tar")

REQUIRED_ENV_KEYS = (
    "PHP_VERSION",
    "WP_SITE_URL",
    "WP_EMAIL",
    "MYSQL_VERSION",
    "MYSQL_USER",
    "MYSQL_PASSWORD",
    "MYSQL_ROOT_PASSWORD",
    "MYSQL_DATABASE",
    "NGINX_VERSION",
    "NGINX_SERVER_NAME",
    "COMPOSE_PROJECT_NAME",
)

SECRET_KEYS = (
    "WP_AUTH_KEY",
    "WP_SECURE_AUTH_KEY",
    "WP_LOGGED_IN_KEY",
    "WP_NONCE_KEY",
    "WP_AUTH_SALT",
    "WP_SECURE_AUTH_SALT",
    "WP_LOGGED_IN_SALT",
    "WP_NONCE_SALT",
)
SECRET_LENGTH = 64
SECRET_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    "!%#&()-+*.=<>@^_~"
)

DOCKER_NETWORK = "wp-dev-shared"
APP_SERVICE = "app"
APP_SETUP_SCRIPT = "/setup.sh"

SSL_CERT_PATH = "docker/nginx/certs/server.crt"
MACOS_KEYCHAIN = "/Library/Keychains/System.keychain"
LOCAL_CA_DIR = "/usr/local/share/ca-certificates"

LOG_DIR_ENV = "WPDEV_LOG_DIR"
RUN_ID_ENV = "WPDEV_RID"
