"""
Transcoding provider contract and registry.
"""
from transcode_prep.providers.provider import (
    Capabilities,
    Description,
    Factory,
    Health,
    InvalidProviderConfig,
    Job,
    JobNotFound,
    Provider,
    ProviderAlreadyRegistered,
    ProviderError,
    ProviderNotFound,
    State,
    Status,
)
from transcode_prep.providers.registry import ProviderRegistry

__all__ = [
    'Capabilities',
    'Description',
    'Factory',
    'Health',
    'InvalidProviderConfig',
    'Job',
    'JobNotFound',
    'Provider',
    'ProviderAlreadyRegistered',
    'ProviderError',
    'ProviderNotFound',
    'ProviderRegistry',
    'State',
    'Status',
]
