"""Domain protocols - interfaces for the collaborators the core consumes."""

from statusclock.domain.protocols.cache import Cache, K, V
from statusclock.domain.protocols.locale import DateFormatter, LocaleData, TimeSkeletons

__all__ = [
    "Cache",
    "K",
    "V",
    "DateFormatter",
    "LocaleData",
    "TimeSkeletons",
]
