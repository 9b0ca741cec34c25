"""
Unoform kitchen style service: prompt synthesis, style validation and
image generation for the four Unoform kitchen styles.
"""

__version__ = "0.1.0"
