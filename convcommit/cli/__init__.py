"""Command-line interface: ccm"""
