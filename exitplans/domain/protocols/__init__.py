"""Domain protocols (ports).

Usage:
    from exitplans.domain.protocols import RateLimitProtocol, JobStoreProtocol
"""

from exitplans.domain.protocols.counter_store_protocol import CounterStoreProtocol
from exitplans.domain.protocols.dispatcher_protocol import DispatcherProtocol
from exitplans.domain.protocols.job_store_protocol import JobMutation, JobStoreProtocol
from exitplans.domain.protocols.logger_protocol import LoggerProtocol
from exitplans.domain.protocols.provider_protocol import ProviderProtocol
from exitplans.domain.protocols.rate_limit_protocol import RateLimitProtocol
from exitplans.domain.protocols.record_store_protocol import RecordStoreProtocol

__all__ = [
    "CounterStoreProtocol",
    "DispatcherProtocol",
    "JobMutation",
    "JobStoreProtocol",
    "LoggerProtocol",
    "ProviderProtocol",
    "RateLimitProtocol",
    "RecordStoreProtocol",
]
