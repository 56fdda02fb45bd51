"""
Agent Node Toolkit Test Suite

Covers the tool parameter and definition models, the tool registry and its
tag index, JSON Schema conversion, built-in tools, and the prompt and data
handling utilities.
"""
