import os

def _canon_prefix(val):
    """
    Normalize API prefix to always be exactly like '/api':
      - defaults to '/api' when unset/empty
      - ensures a single leading slash
      - removes any trailing slash (except for root)
    """
    val = (val or "/api").strip()
    if not val.startswith("/"):
        val = "/" + val
    if len(val) > 1 and val.endswith("/"):
        val = val[:-1]
    return val


def load_allowed_origins() -> list[str]:
    """Parse ``ALLOWED_ORIGINS`` into a list of explicit CORS origins.

    Raises ``ValueError`` when the variable is missing, empty or contains the
    ``*`` wildcard.
    """

    raw = os.getenv("ALLOWED_ORIGINS", "").strip()
    if not raw:
        raise ValueError(
            "ALLOWED_ORIGINS environment variable must be set to a comma-separated "
            "list of trusted origins."
        )

    origins = [o.strip() for o in raw.split(",") if o.strip()]
    if not origins:
        raise ValueError("ALLOWED_ORIGINS must contain at least one non-empty origin.")
    if "*" in origins:
        raise ValueError(
            "ALLOWED_ORIGINS cannot include '*' (wildcard). Specify explicit, trusted origins."
        )
    return origins


def allow_credentials() -> bool:
    return os.getenv("ALLOW_CREDENTIALS", "true").lower() == "true"


def rate_limits_disabled() -> bool:
    return (os.getenv("DISABLE_RATE_LIMITS") or "").lower() == "true"


def event_rate_limit() -> str:
    if rate_limits_disabled():
        return "1000/second"
    return (os.getenv("EVENT_RATE_LIMIT") or "").strip() or "60/minute"


API_PREFIX = _canon_prefix(os.getenv("API_PREFIX"))
