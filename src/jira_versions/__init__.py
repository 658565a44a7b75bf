"""
jira-versions - Create Jira versions for Jenkins core and plugin releases.
"""

__version__ = "1.0.0"
