# ==========================================
# 1. Run Configuration Fields
# ==========================================
# Field names as they appear in the JSON run configuration (camelCase)
REQUIRED_CONFIG_FIELDS = [
    "label",
    "defaultContainer",
    "repoUrl",
    "language",
    "cloudProvider",
]

# Defaults applied by the variable binder for unset optional fields
DEFAULT_APP_LABEL = "default-app"
DEFAULT_CONTAINER_NAME = "main-container"
DEFAULT_JAVA_VERSION = "17"
DEFAULT_NODE_VERSION = "16"

CONFIG_CREDENTIALS_FILE = "config_credentials.json"

# ==========================================
# 2. Templates
# ==========================================
TEMPLATE_PACKAGE = "cloud_deployer"
TEMPLATE_DIR_NAME = "podtemplates"
TEMPLATE_SUFFIX = ".yaml"

# ==========================================
# 3. Providers & Languages
# ==========================================
PROVIDER_AWS = "aws"
PROVIDER_AZURE = "azure"
PROVIDER_GCP = "gcp"

LANGUAGE_JAVA = "java"
LANGUAGE_NODE = "node"

# Credential field -> environment variable injected into provider CLI calls
CREDENTIAL_ENV_VARS = {
    PROVIDER_AWS: {
        "aws_access_key_id": "AWS_ACCESS_KEY_ID",
        "aws_secret_access_key": "AWS_SECRET_ACCESS_KEY",
        "aws_session_token": "AWS_SESSION_TOKEN",
        "aws_region": "AWS_DEFAULT_REGION",
    },
    PROVIDER_AZURE: {
        "azure_client_id": "AZURE_CLIENT_ID",
        "azure_client_secret": "AZURE_CLIENT_SECRET",
        "azure_tenant_id": "AZURE_TENANT_ID",
        "azure_subscription_id": "AZURE_SUBSCRIPTION_ID",
    },
    PROVIDER_GCP: {
        "gcp_credentials_file": "GOOGLE_APPLICATION_CREDENTIALS",
        "gcp_project_id": "CLOUDSDK_CORE_PROJECT",
        "gcp_region": "CLOUDSDK_COMPUTE_REGION",
    },
}

# ==========================================
# 4. Pipeline
# ==========================================
DEFAULT_COMMAND_TIMEOUT_SECONDS = 1800
DEFAULT_WORKSPACE_DIR = "workspace"
