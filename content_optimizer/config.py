import copy
import json

DEFAULT_CONFIG = {
    "SEOAnalyzer": {
        "keyword_min_length": 4, "top_n_keywords_count": 5,
        "title_min_length": 30, "title_max_length": 60,
        "desc_min_length": 120, "desc_max_length": 160,
        "subheading_penalty": 0.7,
        "content_min_words": 300, "content_target_words": 600,
        "paragraph_max_words": 150,
    },
    "ReadabilityAnalyzer": {
        "very_hard_sentence_words": 30, "very_hard_syllables_per_word": 2.5,
        "hard_sentence_words": 20, "hard_syllables_per_word": 2.0,
        "min_grade": 1, "max_grade": 12,
    },
    "TextImprover": {
        "api_key": None, # Usually supplied via HUGGINGFACE_API_KEY
        "model": "facebook/bart-large-cnn",
        "endpoint": None, # Derived from model when unset
        "request_timeout": 30,
        "http_retries_total": 2,
    },
    "Global": {"debug": False, "request_timeout": 10},
}


def merge_config(base: dict, overrides: dict) -> dict:
    """Section-by-section merge; returns a new dict and leaves both inputs untouched."""
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config(path: str = None) -> dict:
    """Defaults merged with an optional JSON file. Bad files fall back to defaults."""
    current_config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return current_config
    try:
        with open(path, 'r') as f:
            custom_config = json.load(f)
        if not isinstance(custom_config, dict):
            print(f"Warning: Config file {path} must contain a JSON object. Using default settings.")
            return current_config
        current_config = merge_config(current_config, custom_config)
        print(f"Loaded custom configuration from {path}")
    except FileNotFoundError:
        print(f"Warning: Config file {path} not found. Using default settings.")
    except json.JSONDecodeError:
        print(f"Warning: Error decoding JSON from {path}. Using default settings.")
    return current_config


def module_config(config: dict, module_name: str) -> dict:
    """Config section for one module with the Global section passed down."""
    section = dict((config or {}).get(module_name, {}) or {})
    section["Global"] = dict((config or {}).get("Global", {}) or {})
    return section
