"""
Cluster-count report for Dirichlet process mixture posterior point estimates.
"""

__version__ = "0.1.0"
