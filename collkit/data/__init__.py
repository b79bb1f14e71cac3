"""
Record datasets for the demo pipelines: the bundled sample and a file loader.
"""

from .loader import load_records
from .sample import SAMPLE_PACKAGES, get_sample_data

__all__ = ["SAMPLE_PACKAGES", "get_sample_data", "load_records"]
