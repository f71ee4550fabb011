"""
Centralized regex patterns used by the interpolation engine.
"""
import re

# Matches a single interpolation placeholder, capturing the variable name.
# Non-greedy so "%{a}-%{b}" yields "a" first.
# Example: "%{environment}" -> "environment"
INTERPOLATION_PATTERN = re.compile(r'%\{(.+?)\}')
