"""Unified command-line interface for receiptscan.

Usage:
    receiptscan scan <image>
    receiptscan scan <image> --csv out.csv
    receiptscan parse <text_file> [--filename receipt.jpg]
"""
