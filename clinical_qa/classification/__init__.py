"""File type fingerprinting"""
from .file_type import FileTypeClassifier

__all__ = ['FileTypeClassifier']
