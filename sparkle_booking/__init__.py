"""
SparkleGo booking submission pipeline.
"""

__version__ = "1.0.0"
