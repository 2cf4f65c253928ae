"""Centralized error and log message templates for the transcription gateway."""


class ErrorMessages:
    """Centralized error message templates."""

    # Upload errors
    UPLOAD_READ_FAILED = "Failed to read uploaded file '{name}': {error}"

    # Provider errors
    PROVIDER_HTTP_ERROR = "Provider returned HTTP {status_code}"
    PROVIDER_TRANSPORT_ERROR = "Provider request failed: {error}"
    PROVIDER_INVALID_JSON = "Provider returned an unparseable body: {error}"
    PROVIDER_NULL_BODY = "Provider returned a null JSON body"

    # Pipeline errors
    PIPELINE_FAILED = "Transcription pipeline failed: {error}"


class LogMessages:
    """Centralized log message templates."""

    # Initialization
    INIT_HTTP_CLIENT = "Created HTTP client with connection pooling (base_url={base_url})"
    CLOSE_HTTP_CLIENT = "Closed provider HTTP client"
    INIT_GATEWAY = "TranscriptionGateway initialized (provider={provider})"

    # Normalization
    REQUEST_FILE = "Processing real file: {name}, size: {size} bytes"
    REQUEST_DEMO = "No file supplied, using demo mode (path={path})"

    # Provider
    PROVIDER_CALL = "Calling provider: POST {url} (variant={variant}, language={language})"
    PROVIDER_OK = "Provider responded successfully in {elapsed:.2f}s"
    PROVIDER_PROBE = "Probing provider: GET {url}"
    PROVIDER_PROBE_RESULT = "Provider probe finished (aws={aws})"

    # Fallback
    FALLBACK_ENTERPRISE = "Provider unavailable (HTTP {status_code}), serving enterprise fallback"
    FALLBACK_BACKUP = "Serving backup response: {reason}"
