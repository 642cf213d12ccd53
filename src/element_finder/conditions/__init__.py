"""
Conditions the element finder polls for, one per kind of lookup
"""

from .visibility import VisibilityOfElement, VisibilityOfAllElements
from .clickable import ElementToBeClickable, EnabledElements
from .presence import PresenceOfAllElements

__all__ = [
    'VisibilityOfElement',
    'VisibilityOfAllElements',
    'ElementToBeClickable',
    'EnabledElements',
    'PresenceOfAllElements'
]
