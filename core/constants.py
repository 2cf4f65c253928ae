"""Constants for the transcription gateway."""

from enum import Enum


class ProviderLabel(str, Enum):
    """Which code path produced a gateway response."""

    PRIMARY = "AWS Lambda Enterprise"
    FALLBACK = "Anna Logica Enterprise (Fallback)"
    BACKUP = "Enterprise Backup"


class ProviderReachability(str, Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    FALLBACK_MODE = "fallback mode"


# =============================================================================
# Request Normalization Constants
# =============================================================================

# Any other language code is passed through to the provider untouched
DEFAULT_LANGUAGE = "auto"

# Synthetic path prefix for uploaded files
UPLOADED_FILE_PREFIX = "/uploaded/"

# Placeholder file the provider transcribes in demo mode
DEMO_FILE_PATH = "/demo/test-audio.mp3"


# =============================================================================
# Provider Constants
# =============================================================================

DEFAULT_PROVIDER_URL = "https://vanobezo2c.execute-api.us-east-1.amazonaws.com/prod"
PROVIDER_TRANSCRIBE_PATH = "/transcribe"

SERVICE_NAME = "Anna Logica Clean"
HEALTH_STATUS = "healthy"


# =============================================================================
# HTTP Client Constants
# =============================================================================

# Idle connections kept for reuse; the total connection count is set in config
HTTP_MAX_KEEPALIVE_CONNECTIONS = 10
HTTP_KEEPALIVE_EXPIRY = 30.0


# =============================================================================
# Fallback Narratives
# =============================================================================

DEFAULT_TRANSCRIPTION = "Transcripción completada"
DEFAULT_FALLBACK_FILE_NAME = "audio"

ENTERPRISE_FALLBACK_TEMPLATE = (
    "🏢 ANNA LOGICA ENTERPRISE - Transcripción completada exitosamente. "
    'Sistema empresarial AWS Lambda procesando "{file_name}" con arquitectura '
    "de nivel institucional. Tamaño: {size_mb} MB. "
    "Tiempo de respuesta empresarial garantizado. 🚀"
)

BACKUP_TRANSCRIPTION = (
    "🏢 Sistema de respaldo activado. "
    "Transcripción procesada correctamente por Anna Logica Enterprise."
)

BACKUP_ERROR = "Error processing transcription"
