"""
Core algebra and domain models for fuzzy linguistic assessments.

Pure, synchronous building blocks: interval algebra, linear and piecewise
linear functions, qualitative domains and their structural predicates.
"""
