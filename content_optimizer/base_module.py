# content_optimizer/base_module.py
from abc import ABC, abstractmethod


class AnalysisModule(ABC):
    """
    Abstract base class for all text analysis modules.
    Each module will implement its own 'analyze' method.
    """

    def __init__(self, config=None):
        self.module_name = self.__class__.__name__
        self.config = config if config else {} # Module-specific config section
        self.global_config = self.config.get("Global", {}) # Global config if passed down

    @abstractmethod
    def analyze(self, text: str):
        """
        Analyzes the given text for the attributes this module covers.

        Args:
            text (str): Raw editor content (markdown-like).

        Returns:
            A result object for this module. Must never raise for string input.
        """
        pass

    def setting(self, key: str, default):
        """Returns a module setting, falling back to the default when unset."""
        value = self.config.get(key)
        return default if value is None else value

    def log(self, message: str):
        if self.global_config.get("debug"):
            print(f"[{self.module_name}] {message}")

    def get_module_name(self) -> str:
        """Returns the name of the module."""
        return self.module_name

    @staticmethod
    def ensure_text(text) -> str:
        if not isinstance(text, str):
            raise TypeError(f"Expected text as str, got {type(text).__name__}")
        return text
