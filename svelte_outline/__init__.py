"""
svelte-outline

Function outline for Svelte components.
"""
from .data_structures import Detection
from .detector import detect_functions
from .extractor import extract_script
from .orchestrator import outline_document

__all__ = [
    'Detection',
    'detect_functions',
    'extract_script',
    'outline_document',
]
