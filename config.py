import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    AUTO_CREATE_SCHEMA = bool(data.get("AUTO_CREATE_SCHEMA", False))
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    JWKS_URI = data.get(
        "JWKS_URI",
        "https://loginproxy.gov.bc.ca/auth/realms/standard/protocol/openid-connect/certs",
    )
    JWT_ISSUER = data.get(
        "JWT_ISSUER", "https://loginproxy.gov.bc.ca/auth/realms/standard"
    )
    JWT_ALGORITHMS = data.get("JWT_ALGORITHMS", ["RS256"])
    TMS_AUDIENCE = data.get("TMS_AUDIENCE", "tenant-management-system")
    ALLOWED_AUDIENCES = data.get("ALLOWED_AUDIENCES", [TMS_AUDIENCE])
    GOV_IDENTITY_PROVIDERS = data.get("GOV_IDENTITY_PROVIDERS", ["idir", "azureidir"])
    OPERATIONS_ADMIN_ROLE = data.get("OPERATIONS_ADMIN_ROLE", "TMS.OPERATIONS_ADMIN")
