"""Text-improvement client package."""

from .client import TextImprover, ImproverError, ImproverConfigError
