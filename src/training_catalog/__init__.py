"""Training catalog: courses, activities, enrollment and summary reports."""

__version__ = "0.1.0"
