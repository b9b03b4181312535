"""File loader implementations"""
from .base import FileLoader
from .csv_loader import CSVLoader

__all__ = ['FileLoader', 'CSVLoader']
