# content_optimizer/improve/client.py
from urllib.parse import urlparse

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

DEFAULT_MODEL = "facebook/bart-large-cnn"
DEFAULT_ENDPOINT_TEMPLATE = "https://api-inference.huggingface.co/models/{model}"
PLACEHOLDER_KEYS = {"your_huggingface_api_key_here", "changeme", ""}


class ImproverError(Exception):
    """Raised when the text-improvement service cannot produce a result."""


class ImproverConfigError(ImproverError, ValueError):
    """Raised when the improver is constructed with unusable settings."""


class TextImprover:
    """
    Client for the external text-improvement backend.

    The analyzers never call this; the caller sends the current text and
    gets revised text back. Credentials are validated once, at construction.
    """

    def __init__(self, config=None):
        self.module_name = self.__class__.__name__
        self.config = config if config else {}
        self.global_config = self.config.get("Global", {})

        self.api_key = (self.config.get("api_key") or "").strip()
        if self.api_key in PLACEHOLDER_KEYS:
            raise ImproverConfigError("TextImprover requires an API key (set TextImprover.api_key or HUGGINGFACE_API_KEY).")
        self.model = self.config.get("model") or DEFAULT_MODEL
        self.endpoint = self.config.get("endpoint") or DEFAULT_ENDPOINT_TEMPLATE.format(model=self.model)
        parsed = urlparse(self.endpoint)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ImproverConfigError(f"Invalid improver endpoint: {self.endpoint}")
        self.timeout = self.config.get("request_timeout", self.global_config.get("request_timeout", 30))

        self.session = requests.Session()
        retries_total = int(self.config.get("http_retries_total", 2))
        if retries_total > 0:
            retry_cfg = Retry(
                total=retries_total,
                connect=retries_total,
                read=retries_total,
                backoff_factor=float(self.config.get("http_backoff_factor", 0.5)),
                status_forcelist=self.config.get("http_status_forcelist", [429, 500, 502, 503, 504]),
                allowed_methods={"POST"},
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry_cfg)
            self.session.mount('http://', adapter)
            self.session.mount('https://', adapter)
        self.session.headers.update({
            'Authorization': f"Bearer {self.api_key}",
            'Accept': 'application/json',
        })

    def improve(self, text: str) -> str:
        """Sends text to the backend and returns the revised text."""
        if not text or not text.strip():
            return ''
        payload = {"inputs": text, "options": {"wait_for_model": True}}
        try:
            resp = self.session.post(self.endpoint, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.exceptions.JSONDecodeError as e:
            raise ImproverError("Text improvement service returned invalid JSON.") from e
        except requests.exceptions.RequestException as e:
            if self.global_config.get("debug"):
                print(f"Request error for {self.endpoint} in {self.module_name}: {e}")
            raise ImproverError(f"Text improvement request failed: {e}") from e
        except ValueError as e:
            raise ImproverError("Text improvement service returned invalid JSON.") from e
        return self._extract_text(data)

    @staticmethod
    def _extract_text(data) -> str:
        if isinstance(data, list) and data:
            data = data[0]
        if isinstance(data, dict):
            if data.get("error"):
                raise ImproverError(f"Text improvement service error: {data['error']}")
            for key in ("generated_text", "summary_text", "text"):
                value = data.get(key)
                if isinstance(value, str):
                    return value.strip()
        raise ImproverError("Text improvement service returned an unexpected payload.")
