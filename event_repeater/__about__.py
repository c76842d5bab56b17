# __about__.py
__version__ = "2.1.0"
