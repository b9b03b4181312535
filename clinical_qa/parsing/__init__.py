"""Delimiter detection and tokenization"""
from .delimiter import detect_delimiter
from .tokenizer import parse_csv_content, split_line

__all__ = ['detect_delimiter', 'parse_csv_content', 'split_line']
