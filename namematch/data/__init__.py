"""Reference data used alongside matching."""

from .token_frequency import TokenFrequencyTable

__all__ = ['TokenFrequencyTable']
